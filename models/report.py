"""
models/report.py
----------------
Value objects returned by the expense and budget services:
sort keys, monthly summaries and budget alerts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from models.expense import Expense


class SortKey(Enum):
    """Orders the expense list can be re-sorted into."""
    AMOUNT_ASC = "amount_asc"
    AMOUNT_DESC = "amount_desc"
    CATEGORY = "category"
    NEWEST = "newest"
    OLDEST = "oldest"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_choice(cls, choice) -> Optional["SortKey"]:
        """
        Map a menu choice ("1".."5"), an enum value/name, or a SortKey to a SortKey.

        Returns:
            The matching key, or None for an unrecognized choice.
        """
        if isinstance(choice, cls):
            return choice
        if not isinstance(choice, str):
            return None
        text = choice.strip()
        if text in _MENU:
            return _MENU[text]
        for key in cls:
            if text.lower() in (key.value, key.name.lower()):
                return key
        return None


_LABELS = {
    SortKey.AMOUNT_ASC: "Amount (low to high)",
    SortKey.AMOUNT_DESC: "Amount (high to low)",
    SortKey.CATEGORY: "Category (A-Z)",
    SortKey.NEWEST: "Date (newest first)",
    SortKey.OLDEST: "Date (oldest first)",
}

_MENU = {str(i): key for i, key in enumerate(SortKey, start=1)}


@dataclass
class MonthlySummary:
    """
    Spending for one calendar month.

    Attributes:
        year: Calendar year of the summarized month.
        month: Month number (1-12).
        totals: Category -> sum of amounts, in first-seen order.
        total: Grand total over all categories.
        count: Number of expenses in the month.
    """
    year: int
    month: int
    totals: dict[str, float] = field(default_factory=dict)
    total: float = 0.0
    count: int = 0


@dataclass
class BudgetAlert:
    """Raised (as a value, not an exception) when a category total goes over its limit."""
    category: str
    spent: float
    limit: float

    @property
    def exceeded_by(self) -> float:
        return self.spent - self.limit

    def __str__(self) -> str:
        return (
            f"Budget exceeded for '{self.category}': "
            f"{self.spent:.2f} / {self.limit:.2f} (+{self.exceeded_by:.2f})"
        )


@dataclass
class AddResult:
    """Outcome of recording an expense: the stored record and an optional budget alert."""
    expense: Expense
    alert: Optional[BudgetAlert] = None
