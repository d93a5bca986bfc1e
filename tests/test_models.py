from datetime import datetime, timedelta, timezone

import pytest

from models.category import DEFAULT_CATEGORIES, resolve_category, resolve_category_index
from models.expense import Expense, parse_amount
from models.report import BudgetAlert, SortKey
from utils.errors import InvalidAmountError


@pytest.mark.parametrize("raw, expected", [
    ("12.50", 12.5),
    (" -3 ", -3.0),
    (7, 7.0),
    (0, 0.0),
])
def test_parse_amount_accepts_numbers(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "-Infinity", None, True, float("nan")])
def test_parse_amount_rejects_non_finite_or_non_numeric(raw):
    with pytest.raises(InvalidAmountError):
        parse_amount(raw)


def test_invalid_amount_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_amount("twelve")


def test_expense_is_immutable():
    expense = Expense(amount=1.0, category="Food")
    with pytest.raises(AttributeError):
        expense.amount = 2.0


def test_expense_default_timestamp_is_utc():
    expense = Expense(amount=1.0, category="Food")
    assert expense.timestamp.tzinfo is not None
    assert expense.timestamp.utcoffset() == timedelta(0)


def test_from_dict_normalizes_offsets_and_naive_times():
    shifted = Expense.from_dict({"amount": 1, "category": "Food", "timestamp": "2026-10-01T02:00:00+02:00"})
    naive = Expense.from_dict({"amount": 1, "category": "Food", "timestamp": "2026-10-01T00:00:00"})
    zulu = Expense.from_dict({"amount": 1, "category": "Food", "timestamp": "2026-10-01T00:00:00Z"})
    expected = datetime(2026, 10, 1, tzinfo=timezone.utc)
    assert shifted.timestamp == naive.timestamp == zulu.timestamp == expected


def test_to_dict_omits_missing_timestamp():
    assert Expense(amount=2.0, category="Bills", timestamp=None).to_dict() == {
        "amount": 2.0,
        "category": "Bills",
    }


@pytest.mark.parametrize("raw, expected", [
    ("1", 0),
    ("6", 5),
    (3, 2),
    (" 2 ", 1),
])
def test_resolve_category_index_valid_choices(raw, expected):
    assert resolve_category_index(raw, DEFAULT_CATEGORIES) == expected


@pytest.mark.parametrize("raw", ["0", "7", "-1", "abc", "", "1.5", None, True])
def test_resolve_category_index_falls_back_to_last_entry(raw):
    assert resolve_category_index(raw, DEFAULT_CATEGORIES) == len(DEFAULT_CATEGORIES) - 1


def test_resolve_category_returns_name():
    assert resolve_category("2", DEFAULT_CATEGORIES) == "Transport"
    assert resolve_category("99", DEFAULT_CATEGORIES) == "Other"


def test_resolve_category_index_empty_list_is_an_error():
    with pytest.raises(ValueError):
        resolve_category_index("1", [])


def test_sort_key_from_menu_choice():
    assert SortKey.from_choice("1") is SortKey.AMOUNT_ASC
    assert SortKey.from_choice("5") is SortKey.OLDEST
    assert SortKey.from_choice("newest") is SortKey.NEWEST
    assert SortKey.from_choice("AMOUNT_DESC") is SortKey.AMOUNT_DESC
    assert SortKey.from_choice(SortKey.CATEGORY) is SortKey.CATEGORY


@pytest.mark.parametrize("choice", ["0", "6", "price", "", None, 3])
def test_sort_key_unknown_choice(choice):
    assert SortKey.from_choice(choice) is None


def test_budget_alert_message():
    alert = BudgetAlert(category="Food", spent=120.0, limit=100.0)
    assert alert.exceeded_by == 20.0
    assert "Food" in str(alert)
    assert "120.00 / 100.00" in str(alert)
