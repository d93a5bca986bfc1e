import json

import pytest

from conftest import at
from models.expense import Expense
from repositories.expense_repo import ExpenseRepository
from utils.errors import StorageError


def test_load_missing_file_returns_empty_list(tmp_path):
    repo = ExpenseRepository(tmp_path / "nope.json")
    assert repo.load() == []


def test_load_corrupt_json_returns_empty_list(data_file, repo):
    data_file.write_text("{not valid json", encoding="utf-8")
    assert repo.load() == []


def test_load_non_array_document_returns_empty_list(data_file, repo):
    data_file.write_text('{"amount": 1, "category": "Food"}', encoding="utf-8")
    assert repo.load() == []


@pytest.mark.parametrize("record", [
    {"category": "Food"},
    {"amount": "12", "category": "Food"},
    {"amount": True, "category": "Food"},
    {"amount": 12, "category": 3},
    {"amount": 12, "category": "Food", "timestamp": "yesterday"},
])
def test_load_schema_mismatch_returns_empty_list(data_file, repo, record):
    data_file.write_text(json.dumps([record]), encoding="utf-8")
    assert repo.load() == []


def test_load_rejects_nan_amount(data_file, repo):
    data_file.write_text('[{"amount": NaN, "category": "Food"}]', encoding="utf-8")
    assert repo.load() == []


def test_load_directory_path_returns_empty_list(tmp_path):
    assert ExpenseRepository(tmp_path).load() == []


def test_round_trip_preserves_content_and_order(repo, sample_expenses):
    repo.save(sample_expenses)
    assert repo.load() == sample_expenses


def test_round_trip_empty_list(repo, data_file):
    repo.save([])
    assert data_file.exists()
    assert repo.load() == []


def test_round_trip_keeps_amount_precision(repo):
    expense = Expense(amount=0.1 + 0.2, category="Food", timestamp=at(2026, 1, 1))
    repo.save([expense])
    assert repo.load()[0].amount == 0.1 + 0.2


def test_save_writes_pretty_printed_array(repo, data_file, sample_expenses):
    repo.save(sample_expenses[:1])
    text = data_file.read_text(encoding="utf-8")
    assert text.startswith("[\n    {")
    assert json.loads(text) == [
        {"amount": 12.5, "category": "Food", "timestamp": "2026-10-01T12:00:00+00:00"}
    ]


def test_save_overwrites_whole_file(repo, sample_expenses):
    repo.save(sample_expenses)
    repo.save(sample_expenses[:1])
    assert repo.load() == sample_expenses[:1]


def test_save_creates_parent_directories(tmp_path, sample_expenses):
    repo = ExpenseRepository(tmp_path / "nested" / "dir" / "expenses.json")
    repo.save(sample_expenses)
    assert len(repo.load()) == 3


def test_save_failure_raises_storage_error(tmp_path, sample_expenses):
    repo = ExpenseRepository(tmp_path)
    with pytest.raises(StorageError):
        repo.save(sample_expenses)


def test_legacy_records_without_timestamp_load(data_file, repo):
    data_file.write_text('[{"amount": 3, "category": "Other"}]', encoding="utf-8")
    assert repo.load() == [Expense(amount=3.0, category="Other", timestamp=None)]


def test_load_deeply_nested_document_returns_empty_list(data_file, repo):
    data_file.write_text("[" * 200000, encoding="utf-8")
    assert repo.load() == []


def test_load_timestamp_outside_datetime_range_returns_empty_list(data_file, repo):
    record = {"amount": 1, "category": "Food", "timestamp": "0001-01-01T00:00:00+01:00"}
    data_file.write_text(json.dumps([record]), encoding="utf-8")
    assert repo.load() == []
