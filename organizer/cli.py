"""Command line front end of the organizer."""

from __future__ import annotations

import argparse
import datetime as _dt
import sys
from contextlib import closing
from dataclasses import astuple

from .academic import AcademicSchedule
from .accounts import register_user
from .budget import BudgetBook
from .database import DEFAULT_DATABASE, OrganizerError, connect
from .expense import ExpenseLedger
from .income import IncomeLedger
from .reminders import first_reminder
from .report import monthly_report

_TRACKERS = {
    "income": IncomeLedger,
    "expense": ExpenseLedger,
    "budget": BudgetBook,
    "academic": AcademicSchedule,
}


def _iso_date(text: str) -> _dt.date:
    try:
        return _dt.date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from exc


def _iso_time(text: str) -> _dt.time:
    try:
        return _dt.time.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time: {text!r}") from exc


def _iso_datetime(text: str) -> _dt.datetime:
    try:
        return _dt.datetime.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date and time: {text!r}") from exc


def _year_month(text: str) -> tuple[int, int]:
    try:
        parsed = _dt.datetime.strptime(text, "%Y-%m")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid month, expected YYYY-MM: {text!r}") from exc
    return parsed.year, parsed.month


def _month_number(text: str) -> int:
    try:
        month = int(text)
    except ValueError:
        month = 0
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"invalid month: {text!r}")
    return month


def _add_record_actions(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser("list", help="show all records")
    delete = subparsers.add_parser("delete", help="delete one record")
    delete.add_argument("id", type=int)
    subparsers.add_parser("clear", help="delete all records")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="organizer", description="Personal finances and academic schedule."
    )
    parser.add_argument("--db", default=DEFAULT_DATABASE, help="database file")
    parser.add_argument("--user", type=int, help="id of the signed-in user")
    commands = parser.add_subparsers(dest="command", required=True)

    register = commands.add_parser("register", help="register a new user")
    register.add_argument("username")
    register.add_argument("password")
    register.add_argument("confirm_password")

    income = commands.add_parser("income", help="income tracker")
    actions = income.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add")
    add.add_argument("date", type=_iso_date)
    add.add_argument("source")
    add.add_argument("amount", type=float)
    _add_record_actions(actions)

    expense = commands.add_parser("expense", help="expense tracker")
    actions = expense.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add")
    add.add_argument("date", type=_iso_date)
    add.add_argument("description")
    add.add_argument("category")
    add.add_argument("amount", type=float)
    add.add_argument("--today", type=_iso_date, default=None)
    _add_record_actions(actions)

    budget = commands.add_parser("budget", help="monthly budgets")
    actions = budget.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add")
    add.add_argument("category")
    add.add_argument("month", type=_month_number)
    add.add_argument("amount", type=float)
    _add_record_actions(actions)

    academic = commands.add_parser("academic", help="academic schedule")
    actions = academic.add_subparsers(dest="action", required=True)
    add = actions.add_parser("add")
    add.add_argument("date", type=_iso_date)
    add.add_argument("time", type=_iso_time)
    add.add_argument("subject")
    add.add_argument("kind", metavar="type")
    _add_record_actions(actions)

    report = commands.add_parser("report", help="monthly financial report")
    report.add_argument("month", type=_year_month, nargs="?", default=None)

    remind = commands.add_parser("remind", help="show an assignment due soon")
    remind.add_argument("--now", type=_iso_datetime, default=None)
    return parser


def _add_record(tracker, args: argparse.Namespace) -> int:
    if args.command == "income":
        return tracker.add(args.date, args.source, args.amount)
    if args.command == "expense":
        return tracker.add(args.date, args.description, args.category, args.amount, args.today)
    if args.command == "budget":
        return tracker.add(args.category, args.month, args.amount)
    return tracker.add(args.date, args.time, args.subject, args.kind)


def _run_tracker(conn, args: argparse.Namespace) -> int:
    tracker = _TRACKERS[args.command](conn, args.user)
    if args.action == "add":
        entry_id = _add_record(tracker, args)
        print(f"Data Insertion Sucessfull! (id {entry_id})")
    elif args.action == "list":
        for entry in tracker.entries():
            print("\t".join(str(value) for value in astuple(entry)))
    elif args.action == "delete":
        if not tracker.delete(args.id):
            print(f"Error: No record with id {args.id}", file=sys.stderr)
            return 1
        print("Record Deleted Sucessfully!")
    else:
        tracker.clear()
        print("Table Cleared Sucessfully!")
    return 0


def _run_report(conn, args: argparse.Namespace) -> int:
    if args.month is None:
        today = _dt.date.today()
        year, month = today.year, today.month
    else:
        year, month = args.month
    report = monthly_report(conn, args.user, year, month)
    print(f"Report for {year:04d}-{month:02d}")
    print(f"Total income: {report.total_income:.2f}")
    print(f"Total expense: {report.total_expense:.2f}")
    print(f"Total savings: {report.total_savings:.2f}")
    print("Income:")
    for source, amount in report.income:
        print(f"  {source}\t{amount:g}")
    print("Expenses:")
    for category, amount in report.expenses:
        print(f"  {category}\t{amount:g}")
    return 0


def _run(conn, args: argparse.Namespace) -> int:
    if args.command == "register":
        user_id = register_user(conn, args.username, args.password, args.confirm_password)
        print(f"User Registration Sucessfull! Your UserID is {user_id}")
        return 0
    if args.command == "report":
        return _run_report(conn, args)
    if args.command == "remind":
        reminder = first_reminder(conn, args.user, args.now)
        print(reminder.message() if reminder else "No upcoming assignments.")
        return 0
    return _run_tracker(conn, args)


def main(argv: list[str] | None = None) -> int:
    """Run the organizer command line and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command != "register" and args.user is None:
        parser.error("--user is required for this command")
    try:
        with closing(connect(args.db)) as conn:
            return _run(conn, args)
    except OrganizerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())