import pytest

from organizer.budget import BudgetBook, BudgetEntry
from organizer.database import DuplicateEntryError, connect


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def test_add_and_list(conn):
    book = BudgetBook(conn, 1)
    entry_id = book.add("Food", "05", 250.5)
    assert book.entries() == [BudgetEntry(entry_id, "Food", "05", 250.5)]


def test_integer_month_is_zero_padded(conn):
    book = BudgetBook(conn, 1)
    book.add("Food", 4, 100)
    (entry,) = book.entries()
    assert entry.month == "04"
    assert entry.amount == 100


def test_integer_and_text_month_collide(conn):
    book = BudgetBook(conn, 1)
    book.add("Food", 4, 100)
    with pytest.raises(DuplicateEntryError, match="already set"):
        book.add("Food", "04", 200)


def test_duplicate_rejected(conn):
    book = BudgetBook(conn, 1)
    book.add("Food", "05", 100)
    with pytest.raises(DuplicateEntryError):
        book.add("Food", "05", 300)
    assert [e.amount for e in book.entries()] == [100]


def test_other_month_or_category_allowed(conn):
    book = BudgetBook(conn, 1)
    book.add("Food", "05", 100)
    book.add("Food", "06", 100)
    book.add("Travel", "05", 100)
    assert [(e.category, e.month) for e in book.entries()] == [
        ("Food", "05"),
        ("Food", "06"),
        ("Travel", "05"),
    ]


def test_same_budget_for_other_user_allowed(conn):
    BudgetBook(conn, 1).add("Food", "05", 100)
    other = BudgetBook(conn, 2)
    other.add("Food", "05", 50)
    assert [e.amount for e in other.entries()] == [50]


def test_delete(conn):
    book = BudgetBook(conn, 1)
    keep = book.add("Food", "05", 100)
    drop = book.add("Travel", "05", 100)
    assert book.delete(drop) is True
    assert [e.id for e in book.entries()] == [keep]
    assert book.delete(drop) is False


def test_delete_after_removal_allows_re_adding(conn):
    book = BudgetBook(conn, 1)
    entry_id = book.add("Food", "05", 100)
    book.delete(entry_id)
    book.add("Food", "05", 300)
    assert [e.amount for e in book.entries()] == [300]


def test_clear_only_affects_user(conn):
    mine = BudgetBook(conn, 1)
    theirs = BudgetBook(conn, 2)
    mine.add("Food", "05", 100)
    mine.add("Travel", "05", 100)
    theirs.add("Food", "05", 100)
    assert mine.clear() == 2
    assert mine.entries() == []
    assert len(theirs.entries()) == 1