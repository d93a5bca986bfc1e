"""
services/expense_service.py
----------------------------
Business logic for managing recorded expenses.
Owns the in-memory expense list for the session and persists it
through the ExpenseRepository after every change.
"""

import math
from datetime import datetime, timezone
from typing import Optional, Union

from models.expense import Expense, as_utc, parse_amount, utc_now
from models.report import AddResult, MonthlySummary, SortKey
from repositories.expense_repo import ExpenseRepository
from services.budget_service import BudgetService
from utils.errors import StorageError, UnsavedChangeError
from utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_HEADER = ["Category", "Amount", "Timestamp"]

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _timestamp_key(expense: Expense) -> datetime:
    # Legacy records without a timestamp sort as the oldest.
    return expense.timestamp or _OLDEST


def _amount_key(expense: Expense) -> float:
    if math.isnan(expense.amount):
        raise ValueError(f"Cannot sort expenses: NaN amount in {expense!r}")
    return expense.amount


class ExpenseService:
    """
    Handles all business logic related to recorded expenses.

    Workflow:
        1. Load the stored list once, at construction.
        2. Apply add / sort / delete to the in-memory list.
        3. Persist the whole list after each of those changes.
        4. Answer queries (filter, monthly summary, export rows) from memory.
    """

    def __init__(self, repo: ExpenseRepository, budget_service: Optional[BudgetService] = None):
        self.repo = repo
        self.budget_service = budget_service or BudgetService()
        self._expenses: list[Expense] = repo.load()

    # ── READ ──────────────────────────────────────────────

    def list_expenses(self) -> list[Expense]:
        """All expenses in the current order (a copy)."""
        return list(self._expenses)

    def count(self) -> int:
        return len(self._expenses)

    def is_empty(self) -> bool:
        return not self._expenses

    def total(self) -> float:
        return sum(e.amount for e in self._expenses)

    # ── CREATE ────────────────────────────────────────────

    def add(self, amount, category: str, now: Optional[datetime] = None) -> AddResult:
        """
        Record a new expense and save.

        Args:
            amount: A number or the text typed by the user.
            category: Category label, stored as given.
            now: Creation time; defaults to the current UTC time.

        Returns:
            AddResult with the stored expense and a BudgetAlert when the
            category total is now over its limit.

        Raises:
            InvalidAmountError: If the amount is not a finite number. Nothing is recorded.
            UnsavedChangeError: If the list could not be saved. The expense stays in
                memory and the error carries the AddResult, budget alert included.
        """
        value = parse_amount(amount)
        expense = Expense(
            amount=value,
            category=category,
            timestamp=as_utc(now) if now is not None else utc_now(),
        )
        self._expenses.append(expense)
        logger.info(f"Added expense {value:.2f} in '{category}'")
        result = AddResult(
            expense=expense,
            alert=self.budget_service.check_budget_alert(category, self._expenses),
        )
        try:
            self.repo.save(self._expenses)
        except StorageError as e:
            raise UnsavedChangeError(str(e), result) from e
        return result

    # ── ORDER ─────────────────────────────────────────────

    def sort(self, key: Union[SortKey, str]) -> bool:
        """
        Re-sort the list in place; the new order is saved.

        Args:
            key: A SortKey or a menu choice such as "1".

        Returns:
            False (and no change) for an unrecognized key.

        Raises:
            ValueError: If an amount sort meets a NaN amount.
        """
        sort_key = SortKey.from_choice(key)
        if sort_key is None:
            logger.warning(f"Invalid sort choice: {key!r}")
            return False

        if sort_key is SortKey.AMOUNT_ASC:
            self._expenses.sort(key=_amount_key)
        elif sort_key is SortKey.AMOUNT_DESC:
            self._expenses.sort(key=_amount_key, reverse=True)
        elif sort_key is SortKey.CATEGORY:
            self._expenses.sort(key=lambda e: e.category)
        elif sort_key is SortKey.NEWEST:
            self._expenses.sort(key=_timestamp_key, reverse=True)
        else:
            self._expenses.sort(key=_timestamp_key)

        logger.info(f"Sorted {len(self._expenses)} expenses by {sort_key.value}")
        self.repo.save(self._expenses)
        return True

    # ── QUERIES ───────────────────────────────────────────

    def filter(self, category: str) -> list[Expense]:
        """Expenses whose category matches, ignoring case."""
        wanted = category.strip().casefold()
        return [e for e in self._expenses if e.category.casefold() == wanted]

    def monthly_summary(self, reference_time: Optional[datetime] = None) -> Optional[MonthlySummary]:
        """
        Summarize the expenses of one calendar month.

        Args:
            reference_time: Any instant in the month to summarize; defaults to now (UTC).

        Returns:
            Category totals and the grand total, or None when the month has no expenses.
        """
        ref = as_utc(reference_time) if reference_time is not None else utc_now()
        in_month = [
            e for e in self._expenses
            if e.timestamp is not None
            and e.timestamp.year == ref.year
            and e.timestamp.month == ref.month
        ]
        if not in_month:
            return None

        totals: dict[str, float] = {}
        for e in in_month:
            totals[e.category] = totals.get(e.category, 0.0) + e.amount

        return MonthlySummary(
            year=ref.year,
            month=ref.month,
            totals=totals,
            total=sum(totals.values()),
            count=len(in_month),
        )

    # ── BUDGETS ───────────────────────────────────────────

    def set_budget(self, category: str, limit) -> float:
        """Set the budget limit for a category (see BudgetService.set_budget)."""
        return self.budget_service.set_budget(category, limit)

    def budget_status(self) -> list[dict]:
        return self.budget_service.get_budget_status(self._expenses)

    # ── DELETE ────────────────────────────────────────────

    def delete_at(self, one_based_index) -> Optional[Expense]:
        """
        Delete the expense shown at a 1-based position in the current order.

        Returns:
            The removed expense, or None when the position is outside [1, count].
        """
        if isinstance(one_based_index, bool) or not isinstance(one_based_index, int):
            logger.warning(f"Invalid expense number: {one_based_index!r}")
            return None
        if not 1 <= one_based_index <= len(self._expenses):
            logger.warning(
                f"Expense number {one_based_index} out of range (1-{len(self._expenses)})"
            )
            return None

        removed = self._expenses.pop(one_based_index - 1)
        logger.info(f"Deleted expense #{one_based_index}: {removed}")
        self.repo.save(self._expenses)
        return removed

    # ── EXPORT / SAVE ─────────────────────────────────────

    def export_records(self) -> list[list[str]]:
        """
        Rows for the CSV export, header first.

        Amounts use two decimals like the console; timestamps are ISO-8601
        text (empty for records stored without one).
        """
        rows = [list(EXPORT_HEADER)]
        for e in self._expenses:
            rows.append([
                e.category,
                f"{e.amount:.2f}",
                e.timestamp.isoformat() if e.timestamp else "",
            ])
        return rows

    def save(self) -> None:
        """Persist the current list explicitly (used on exit)."""
        self.repo.save(self._expenses)
