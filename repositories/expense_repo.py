"""
repositories/expense_repo.py
-----------------------------
Data access layer for recorded expenses.
The whole collection lives in a single pretty-printed JSON document.
"""

import json
from pathlib import Path
from typing import Iterable, Union

from models.expense import Expense
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


class ExpenseRepository:
    """Loads and saves the full expense list as one JSON array."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    # ── READ ──────────────────────────────────────────────

    def load(self) -> list[Expense]:
        """
        Read every stored expense.

        Never fails: a missing file means first run, and an unreadable or
        corrupt file means starting fresh. Both return an empty list.

        Returns:
            The stored expenses in file order.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No expenses file at {self.path}, starting with an empty list")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {self.path}: {e}. Starting with an empty list")
            return []

        try:
            data = json.loads(text)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            expenses = [Expense.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError, RecursionError, OverflowError) as e:
            logger.warning(f"Expenses file {self.path} is corrupt ({e}). Starting with an empty list")
            return []

        logger.info(f"Loaded {len(expenses)} expenses from {self.path}")
        return expenses

    # ── WRITE ─────────────────────────────────────────────

    def save(self, expenses: Iterable[Expense]) -> None:
        """
        Overwrite the file with the full expense list.

        Args:
            expenses: Every expense to keep, in the order to store them.

        Raises:
            StorageError: If the file cannot be written.
        """
        payload = [e.to_dict() for e in expenses]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save expenses to {self.path}: {e}")
            raise StorageError(f"Could not save expenses to {self.path}: {e}") from e
        logger.info(f"Saved {len(payload)} expenses to {self.path}")
