"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Storage ───────────────────────────────────────────────
EXPENSES_FILE: str = os.getenv("EXPENSES_FILE", "expenses.json")

# ── Export ────────────────────────────────────────────────
EXPORT_FILE: str = os.getenv("EXPORT_FILE", "expenses.csv")
CHART_FILE: str = os.getenv("CHART_FILE", "monthly_summary.png")

# ── Categories ────────────────────────────────────────────
# 'free' lets the user type any category, 'list' picks from EXPENSE_CATEGORIES by number.
CATEGORY_PICKER: str = os.getenv("CATEGORY_PICKER", "free").strip().lower()

_raw_categories = os.getenv("EXPENSE_CATEGORIES", "")
EXPENSE_CATEGORIES: list[str] = (
    [c.strip() for c in _raw_categories.split(",") if c.strip()]
    if _raw_categories
    else []
)

# ── Budgets ───────────────────────────────────────────────
BUDGET_WARNING_PERCENT: float = float(os.getenv("BUDGET_WARNING_PERCENT", "80"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE: str = os.getenv("LOG_FILE", "")
