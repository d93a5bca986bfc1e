"""
handlers/budget_handler.py
---------------------------
Handles budget management: setting limits and showing their status.
"""

from rich.markup import escape
from rich.table import Table

from handlers.context import AppContext
from utils.errors import InvalidAmountError

_STATUS_ICONS = {"ok": "🟢", "warning": "🟡", "exceeded": "🔴"}


def budget_command(ctx: AppContext) -> None:
    """Set (or replace) the budget limit for a category."""
    category = ctx.ask("Category").strip()
    if not category:
        ctx.warn("Category cannot be empty.")
        return

    try:
        limit = ctx.expenses.set_budget(category, ctx.ask("Budget limit"))
    except InvalidAmountError:
        ctx.warn("The budget limit must be a number.")
        return
    ctx.success(f"Budget for '{escape(category)}' set to {limit:.2f}")


def budget_status_command(ctx: AppContext) -> None:
    """Show spending against every budget set this session."""
    rows = ctx.expenses.budget_status()
    if not rows:
        ctx.console.print("📭 No budgets set. Use 'Set budget' to add one.")
        return

    table = Table(title="💰 Budget status", title_justify="left")
    table.add_column("")
    table.add_column("Category")
    table.add_column("Spent", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Progress")
    table.add_column("Remaining", justify="right")
    for row in rows:
        table.add_row(
            _STATUS_ICONS[row["status"]],
            escape(row["category"]),
            f"{row['spent']:.2f}",
            f"{row['limit']:.2f}",
            f"{ctx.expenses.budget_service.progress_bar(row['percent'])} {row['percent']:.0f}%",
            f"{row['remaining']:.2f}",
        )
    ctx.console.print(table)
