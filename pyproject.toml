[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "organizer"
version = "0.1.0"
description = "Personal organizer in SQLite: income, expenses checked against monthly budgets, academic schedule, reports and reminders"
requires-python = ">=3.10"
dependencies = []
keywords = ["organizer", "budget", "expenses", "income", "schedule", "sqlite", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
organizer = "organizer.cli:main"

[tool.setuptools.packages.find]
include = ["organizer*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
