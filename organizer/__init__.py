"""Personal organizer in SQLite: income, expenses, budgets, academic schedule, reports and reminders."""

__version__ = "0.1.0"
__all__ = ["__version__"]