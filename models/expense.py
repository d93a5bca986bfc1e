"""
models/expense.py
-----------------
Domain model for a single recorded expense.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from utils.errors import InvalidAmountError


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_amount(value: Any) -> float:
    """
    Parse user input or a number into a finite float.

    Args:
        value: A number or the text typed by the user (e.g. "12.50", "-3").

    Returns:
        The amount as a float. Negative values are allowed.

    Raises:
        InvalidAmountError: If the value is not numeric, is NaN/infinite, or is a bool.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        amount = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidAmountError(f"Invalid amount: {value!r}") from None
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}")
    return amount


def _parse_timestamp(raw: Any) -> Optional[datetime]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be an ISO-8601 string, got {type(raw).__name__}")
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(text))


@dataclass(frozen=True)
class Expense:
    """
    Represents a single recorded expense.

    Records are immutable: the only way to change one is to delete it.

    Attributes:
        amount: Signed amount; negative values are stored as entered.
        category: Free-form category label.
        timestamp: UTC creation time. None for legacy records saved without one.
    """
    amount: float
    category: str
    timestamp: Optional[datetime] = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        """Serialize to the JSON storage shape."""
        data = {"amount": self.amount, "category": self.category}
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Expense":
        """
        Build an Expense from a stored JSON object.

        Raises:
            KeyError: If 'amount' or 'category' is missing.
            TypeError: If a field has the wrong type.
            ValueError: If the amount is not finite or the timestamp is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expense record must be an object, got {type(data).__name__}")
        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError(f"amount must be a number, got {amount!r}")
        category = data["category"]
        if not isinstance(category, str):
            raise TypeError(f"category must be a string, got {category!r}")
        return cls(
            amount=parse_amount(amount),
            category=category,
            timestamp=_parse_timestamp(data.get("timestamp")),
        )

    def __str__(self) -> str:
        when = self.timestamp.strftime("%Y-%m-%d %H:%M") if self.timestamp else "-"
        return f"{self.amount:.2f} | {self.category} | {when}"
