"""
models/category.py
------------------
The fixed category list used by the numbered category picker,
and the rule that turns a typed choice into a category.
"""

DEFAULT_CATEGORIES: list[str] = [
    "Food",
    "Transport",
    "Entertainment",
    "Bills",
    "Shopping",
    "Other",
]


def resolve_category_index(raw, categories: list[str]) -> int:
    """
    Turn a 1-based menu choice into a 0-based index into `categories`.

    A bad pick never blocks recording an expense: non-numeric input or a
    number outside [1, len(categories)] resolves to the last entry, which
    is the catch-all "Other" category.

    Args:
        raw: What the user typed (str or int).
        categories: The list shown to the user. Must not be empty.

    Returns:
        A valid 0-based index.
    """
    if not categories:
        raise ValueError("categories must not be empty")
    fallback = len(categories) - 1
    if isinstance(raw, bool):
        return fallback
    try:
        choice = int(raw.strip()) if isinstance(raw, str) else int(raw)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if 1 <= choice <= len(categories):
        return choice - 1
    return fallback


def resolve_category(raw, categories: list[str]) -> str:
    """Return the category name for a 1-based menu choice (see resolve_category_index)."""
    return categories[resolve_category_index(raw, categories)]
