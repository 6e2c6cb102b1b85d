import datetime as dt

import pytest

from organizer.budget import BudgetBook
from organizer.database import connect
from organizer.expense import ExpenseLedger
from organizer.income import IncomeLedger
from organizer.report import monthly_report

TODAY = dt.date(2024, 5, 20)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    BudgetBook(connection, 1).add("Food", 5, 500.0)
    income = IncomeLedger(connection, 1)
    income.add(dt.date(2024, 5, 1), "Salary", 1000.0)
    income.add(dt.date(2024, 5, 15), "Gift", 50.0)
    income.add(dt.date(2024, 4, 30), "Old", 7.0)
    expenses = ExpenseLedger(connection, 1)
    expenses.add(dt.date(2024, 5, 3), "Lunch", "Food", 30.0, today=TODAY)
    expenses.add(dt.date(2024, 5, 9), "Dinner", "Food", 45.0, today=TODAY)
    yield connection
    connection.close()


def test_line_items_for_the_month(conn):
    report = monthly_report(conn, 1, 2024, 5)
    assert report.income == (("Salary", 1000.0), ("Gift", 50.0))
    assert report.expenses == (("Food", 30.0), ("Food", 45.0))


def test_totals_match_line_items(conn):
    report = monthly_report(conn, 1, 2024, 5)
    assert report.total_income == sum(amount for _, amount in report.income)
    assert report.total_expense == sum(amount for _, amount in report.expenses)


def test_savings_is_income_minus_expense(conn):
    report = monthly_report(conn, 1, 2024, 5)
    assert report.total_savings == report.total_income - report.total_expense


def test_other_month_is_separate(conn):
    report = monthly_report(conn, 1, 2024, 4)
    assert report.income == (("Old", 7.0),)
    assert report.expenses == ()
    assert report.total_expense == 0.0


def test_empty_month_and_other_user_are_zero(conn):
    for report in (monthly_report(conn, 1, 2023, 1), monthly_report(conn, 2, 2024, 5)):
        assert (report.total_income, report.total_expense, report.total_savings) == (
            0.0,
            0.0,
            0.0,
        )
        assert report.income == ()


def test_invalid_month_raises(conn):
    with pytest.raises(ValueError):
        monthly_report(conn, 1, 2024, 13)