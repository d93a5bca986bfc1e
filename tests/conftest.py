import io
from datetime import datetime, timezone

import pytest
from rich.console import Console

from handlers.context import AppContext
from models.expense import Expense
from repositories.expense_repo import ExpenseRepository
from services.budget_service import BudgetService
from services.expense_service import ExpenseService


class MemoryRepository:
    """Stand-in for ExpenseRepository that keeps every save in memory."""

    def __init__(self, expenses=None):
        self.initial = list(expenses or [])
        self.saves = []

    def load(self):
        return list(self.initial)

    def save(self, expenses):
        self.saves.append(list(expenses))


def at(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "expenses.json"


@pytest.fixture
def repo(data_file):
    return ExpenseRepository(data_file)


@pytest.fixture
def service(repo):
    return ExpenseService(repo, BudgetService())


@pytest.fixture
def sample_expenses():
    return [
        Expense(amount=12.5, category="Food", timestamp=at(2026, 10, 1)),
        Expense(amount=40.0, category="Transport", timestamp=at(2026, 9, 15)),
        Expense(amount=-5.0, category="FOOD", timestamp=at(2026, 10, 10)),
    ]


@pytest.fixture
def make_ctx(tmp_path):
    """Build an AppContext with a recording console and scripted answers."""

    def _make(answers=(), expenses=None, **settings):
        repo = ExpenseRepository(tmp_path / "expenses.json")
        if expenses:
            repo.save(expenses)
        console = Console(file=io.StringIO(), width=200, color_system=None)
        ctx = AppContext(
            console=console,
            expenses=ExpenseService(repo, BudgetService()),
            export_file=str(tmp_path / "expenses.csv"),
            chart_file=str(tmp_path / "chart.png"),
            **settings,
        )
        remaining = iter(answers)
        ctx.ask = lambda question, **kwargs: next(remaining)
        return ctx

    return _make


def output_of(ctx):
    return ctx.console.file.getvalue()
