"""
services/export_service.py
---------------------------
Writes CSV exports of recorded expenses.
"""

from pathlib import Path
from typing import Union

import pandas as pd

from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


class ExportService:
    """Turns export rows (header first) into a downloadable CSV file."""

    @staticmethod
    def to_dataframe(rows: list[list[str]]) -> pd.DataFrame:
        """
        Build a DataFrame from rows whose first entry is the header.

        Cells are kept as text so amounts keep their two-decimal form.
        """
        if not rows:
            raise ValueError("export rows must start with a header row")
        header, *data = rows
        return pd.DataFrame(data, columns=header, dtype=str)

    def export_csv(self, rows: list[list[str]], path: Union[str, Path]) -> int:
        """
        Export rows as a CSV file.

        Args:
            rows: Output of ExpenseService.export_records().
            path: Destination file; overwritten if it exists.

        Returns:
            The number of data rows written (header excluded).

        Raises:
            StorageError: If the file cannot be written.
        """
        df = self.to_dataframe(rows)
        target = Path(path)
        try:
            df.to_csv(target, index=False, encoding="utf-8")
        except OSError as e:
            logger.error(f"CSV export to {target} failed: {e}")
            raise StorageError(f"Could not write {target}: {e}") from e
        logger.info(f"Exported {len(df)} records as CSV to {target}")
        return len(df)
