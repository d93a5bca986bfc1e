"""
utils/errors.py
---------------
Exception types raised by the expense tracker core.
"""


class ExpenseTrackerError(Exception):
    """Base class for all expense tracker errors."""


class InvalidAmountError(ExpenseTrackerError, ValueError):
    """Raised when an amount is not a finite number."""


class StorageError(ExpenseTrackerError, OSError):
    """Raised when the expenses file or an export file cannot be written."""


class UnsavedChangeError(StorageError):
    """Raised when a change was applied in memory but could not be saved.

    `result` carries what the operation would have returned, so callers
    can still report it.
    """

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
