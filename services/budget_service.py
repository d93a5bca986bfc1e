"""
services/budget_service.py
---------------------------
Business logic for per-category budget limits and tracking.
Limits live in memory for the current session only.
"""

from typing import Iterable, Optional

from models.expense import Expense, parse_amount
from models.report import BudgetAlert
from utils.logger import get_logger

logger = get_logger(__name__)


class BudgetService:
    """Manages category budget limits and alerts."""

    def __init__(self, warning_percent: float = 80.0):
        self.warning_percent = warning_percent
        self._limits: dict[str, float] = {}

    @property
    def budgets(self) -> dict[str, float]:
        """A copy of the category -> limit mapping."""
        return dict(self._limits)

    def set_budget(self, category: str, limit) -> float:
        """
        Set or replace the limit for a category (last value wins).

        Raises:
            InvalidAmountError: If the limit is not a finite number.
        """
        value = parse_amount(limit)
        self._limits[category] = value
        logger.info(f"Budget for '{category}' set to {value:.2f}")
        return value

    def get_limit(self, category: str) -> Optional[float]:
        return self._limits.get(category)

    def delete_budget(self, category: str) -> bool:
        """Remove a budget limit. Returns False when none was set."""
        if category not in self._limits:
            return False
        del self._limits[category]
        logger.info(f"Budget for '{category}' removed")
        return True

    @staticmethod
    def spent_for(category: str, expenses: Iterable[Expense]) -> float:
        """Sum of all amounts recorded under exactly this category (case-sensitive)."""
        return sum(e.amount for e in expenses if e.category == category)

    def check_budget_alert(self, category: str, expenses: Iterable[Expense]) -> Optional[BudgetAlert]:
        """
        Check whether a category has gone over its limit.
        Called after each expense is added.

        Returns:
            A BudgetAlert when the category total is strictly greater than
            its limit, otherwise None (also when no limit is set).
        """
        limit = self._limits.get(category)
        if limit is None:
            return None
        spent = self.spent_for(category, expenses)
        if spent > limit:
            logger.info(f"Budget for '{category}' exceeded: {spent:.2f} > {limit:.2f}")
            return BudgetAlert(category=category, spent=spent, limit=limit)
        return None

    def get_budget_status(self, expenses: Iterable[Expense]) -> list[dict]:
        """
        Get current spending vs budget for all categories.

        Returns:
            One dict per budget, sorted by category, with keys 'category',
            'limit', 'spent', 'percent', 'remaining' and 'status'
            ('ok', 'warning' or 'exceeded').
        """
        expenses = list(expenses)
        rows = []
        for category in sorted(self._limits):
            limit = self._limits[category]
            spent = self.spent_for(category, expenses)
            pct = (spent / limit * 100) if limit > 0 else 0.0

            if spent > limit:
                status = "exceeded"
            elif pct >= self.warning_percent:
                status = "warning"
            else:
                status = "ok"

            rows.append({
                "category": category,
                "limit": limit,
                "spent": spent,
                "percent": pct,
                "remaining": max(0.0, limit - spent),
                "status": status,
            })
        return rows

    @staticmethod
    def progress_bar(pct: float, length: int = 15) -> str:
        """Generate a text progress bar."""
        filled = int(max(0.0, min(pct, 100.0)) / 100 * length)
        empty = length - filled
        if pct > 100:
            return "█" * length + " !"
        return "█" * filled + "░" * empty
