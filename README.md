# organizer

A small personal organizer kept in a single SQLite file. Each registered user
has their own:

- **income** records (date, source, amount),
- **expense** records (date, description, category, amount), checked against
  the budget set for that category and month,
- **budgets** per category and month,
- **academic schedule** entries (date, time, subject, type such as
  `Assignment`),
- **monthly reports** with total income, total expense and savings,
- **reminders** for assignments due within the next two hours.

## Install

```
pip install .
```

## Command line

The `organizer` command opens the database (`users.db` in the current
directory unless `--db FILE` is given) and creates the tables if they are
missing. Every command except `register` needs `--user ID`, the id printed at
registration.

```
organizer register alice password password
organizer --user 1 budget add Food 5 300
organizer --user 1 expense add 2024-05-10 groceries Food 42.5 --today 2024-05-10
organizer --user 1 income add 2024-05-01 Salary 1500
organizer --user 1 academic add 2024-05-20 14:00:00 Physics Assignment
organizer --user 1 report 2024-05
organizer --user 1 remind --now 2024-05-20T13:00:00
```

Commands:

- `register USERNAME PASSWORD CONFIRM_PASSWORD` creates a user and prints its id.
- `income`, `expense`, `budget` and `academic` each take an action:
  - `add ...` records an entry and prints its id:
    - `income add DATE SOURCE AMOUNT`
    - `expense add DATE DESCRIPTION CATEGORY AMOUNT [--today DATE]`
    - `budget add CATEGORY MONTH AMOUNT` (month `1`–`12`)
    - `academic add DATE TIME SUBJECT TYPE`
  - `list` prints every entry of the user, one per line, tab separated.
  - `delete ID` removes one entry (exit status 1 if there is none with that id).
  - `clear` removes all of the user's entries of that kind.
- `report [YYYY-MM]` prints the totals and line items of a month (the current
  month by default).
- `remind [--now DATETIME]` prints the first assignment due within two hours
  of now, or `No upcoming assignments.`

Dates are `YYYY-MM-DD`, times `HH:MM[:SS]`. Errors are printed as `Error: ...`
and the command exits with status 1. `python -m organizer.cli` runs the same
command.

### Rules the commands enforce

- Registration needs all three fields, matching passwords and an unused
  username.
- Income and expense amounts must be positive; an expense needs a description.
- An expense is only accepted if a budget is set for its category in the
  current month (or the month of `--today`) and the amount fits what is left
  of it. Budgets carry a month but no year, so spending is counted over that
  month in every year.
- A category's budget can be set only once per month.
- The same academic entry (date, time, subject, type) cannot be added twice.

## Library use

```python
from datetime import date
from organizer.database import connect
from organizer.accounts import register_user
from organizer.budget import BudgetBook
from organizer.expense import ExpenseLedger
from organizer.income import IncomeLedger
from organizer.report import monthly_report

conn = connect("users.db")
password = "password"
user_id = register_user(conn, "alice", password, password)

BudgetBook(conn, user_id).add("Food", 5, 300.0)
ExpenseLedger(conn, user_id).add("2024-05-10", "groceries", "Food", 42.5,
                                 today=date(2024, 5, 10))
IncomeLedger(conn, user_id).add(date(2024, 5, 1), "Salary", 1500.0)

report = monthly_report(conn, user_id, 2024, 5)
print(report.total_income, report.total_expense, report.total_savings)
```

Modules:

- `organizer.database`: `connect(path)`, `create_tables(conn)` and the
  exceptions `OrganizerError`, `ValidationError` (bad input) and
  `DuplicateEntryError` (entry already recorded).
- `organizer.accounts`: `register_user`, `username_taken`.
- `organizer.income`, `organizer.expense`, `organizer.budget`,
  `organizer.academic`: `IncomeLedger`, `ExpenseLedger`, `BudgetBook` and
  `AcademicSchedule`, each built from a connection and a user id, with `add`,
  `entries`, `delete` and `clear`. `ExpenseLedger` also has `spent(category,
  month)` and `budget_for(category, month)`.
- `organizer.report`: `monthly_report(conn, user_id, year, month)` returning a
  `MonthlyReport`.
- `organizer.reminders`: `upcoming_assignments(conn, user_id, now)` and
  `first_reminder(conn, user_id, now)` returning `Reminder` objects, whose
  `message()` gives the reminder text.

Income dates given as `date` objects are stored as `YYYY/MM/DD`, which is the
form the monthly report looks for; expense dates are stored as `YYYY-MM-DD`.

## What it does not do

- There is no graphical interface, only the command line and the library.
- There is no login: the command line trusts the `--user` id it is given, and
  passwords are stored as given, without hashing.
- Reminders are not checked in the background; `remind` looks once, when run.

## Tests

```
pip install .[test]
pytest
```