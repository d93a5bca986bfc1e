import pandas as pd
import pytest

from conftest import at
from models.expense import Expense
from services.expense_service import ExpenseService
from services.export_service import ExportService
from utils.errors import StorageError


def test_export_csv_writes_header_and_rows(service, tmp_path):
    service.add(12.5, "Food", now=at(2026, 10, 1))
    service.add(3, "Bus, night", now=at(2026, 10, 2))
    target = tmp_path / "out.csv"

    written = ExportService().export_csv(service.export_records(), target)

    assert written == 2
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Category,Amount,Timestamp"
    assert lines[1] == "Food,12.50,2026-10-01T12:00:00+00:00"
    assert lines[2] == '"Bus, night",3.00,2026-10-02T12:00:00+00:00'


def test_export_csv_empty_store_writes_header_only(service, tmp_path):
    target = tmp_path / "out.csv"
    assert ExportService().export_csv(service.export_records(), target) == 0
    assert target.read_text(encoding="utf-8").strip() == "Category,Amount,Timestamp"


def test_export_keeps_amount_text():
    df = ExportService.to_dataframe([["Category", "Amount", "Timestamp"], ["Food", "10.00", ""]])
    assert list(df.columns) == ["Category", "Amount", "Timestamp"]
    assert df.loc[0, "Amount"] == "10.00"


def test_export_csv_reads_back_with_pandas(repo, tmp_path):
    repo.save([Expense(amount=-2.0, category="Refund", timestamp=at(2026, 1, 1))])
    target = tmp_path / "out.csv"
    ExportService().export_csv(ExpenseService(repo).export_records(), target)
    df = pd.read_csv(target)
    assert df.loc[0, "Category"] == "Refund"
    assert df.loc[0, "Amount"] == -2.0


def test_export_csv_failure_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        ExportService().export_csv([["Category", "Amount", "Timestamp"]], tmp_path)


def test_to_dataframe_requires_header():
    with pytest.raises(ValueError):
        ExportService.to_dataframe([])
