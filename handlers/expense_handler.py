"""
handlers/expense_handler.py
----------------------------
Handles expense-related interactions: add, view, sort, filter,
monthly summary and delete.
Delegates all logic to ExpenseService.
"""

from datetime import datetime
from typing import Iterable, Optional

from rich.markup import escape
from rich.table import Table

from handlers.context import AppContext
from models.category import resolve_category
from models.expense import Expense
from models.report import SortKey
from utils.errors import InvalidAmountError, StorageError, UnsavedChangeError
from utils.logger import get_logger

logger = get_logger(__name__)


def expense_table(title: str, expenses: Iterable[Expense]) -> Table:
    """Render expenses as a numbered table; numbers are the ones delete expects."""
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date")
    table.add_column("Category")
    table.add_column("Amount", justify="right")

    for i, e in enumerate(expenses, start=1):
        when = e.timestamp.strftime("%Y-%m-%d %H:%M") if e.timestamp else "-"
        style = "red" if e.amount < 0 else None
        table.add_row(str(i), when, escape(e.category), f"{e.amount:.2f}", style=style)
    return table


def _ask_category(ctx: AppContext) -> str:
    if ctx.category_picker != "list":
        return ctx.ask("Category").strip() or ctx.categories[-1]

    for i, name in enumerate(ctx.categories, start=1):
        ctx.console.print(f"  [cyan]{i}[/cyan]. {escape(name)}")
    raw = ctx.ask("Choose a category number")
    return resolve_category(raw, ctx.categories)


def add_command(ctx: AppContext) -> None:
    """Prompt for an amount and a category, then record the expense."""
    raw_amount = ctx.ask("Amount")
    category = _ask_category(ctx)

    try:
        result = ctx.expenses.add(raw_amount, category)
    except InvalidAmountError:
        ctx.warn("Invalid input! Please enter a valid number.")
        return
    except UnsavedChangeError as e:
        logger.error(f"Expense recorded but not saved: {e}")
        ctx.warn("Expense recorded for this session, but it could not be saved to disk.")
        result = e.result
    else:
        ctx.success(f"Added expense: {result.expense.amount:.2f} in {escape(result.expense.category)}")

    if result is not None and result.alert:
        ctx.console.print(f"[bold red]🚨 {escape(str(result.alert))}[/bold red]")


def view_command(ctx: AppContext) -> None:
    """Show every expense in the current order with the running total."""
    if ctx.expenses.is_empty():
        ctx.console.print("📭 No expenses recorded yet.")
        return
    ctx.console.print(expense_table("📔 Your expenses", ctx.expenses.list_expenses()))
    ctx.console.print(f"[bold]Total: {ctx.expenses.total():.2f}[/bold]")


def sort_command(ctx: AppContext) -> None:
    """Ask for a sort order and re-sort the stored list."""
    if ctx.expenses.is_empty():
        ctx.console.print("📭 No expenses to sort.")
        return

    for i, key in enumerate(SortKey, start=1):
        ctx.console.print(f"  [cyan]{i}[/cyan]. {key.label}")
    choice = ctx.ask("Sort by")

    try:
        sorted_ok = ctx.expenses.sort(choice)
    except StorageError:
        ctx.warn("Expenses sorted, but the new order could not be saved.")
        return

    if not sorted_ok:
        ctx.warn("Invalid choice.")
        return
    ctx.success(f"Sorted by {SortKey.from_choice(choice).label.lower()}.")
    view_command(ctx)


def filter_command(ctx: AppContext) -> None:
    """Show only the expenses of one category (case-insensitive)."""
    if ctx.expenses.is_empty():
        ctx.console.print("📭 No expenses recorded yet.")
        return

    category = ctx.ask("Category to show").strip()
    matches = ctx.expenses.filter(category)
    if not matches:
        ctx.console.print(f"📭 No expenses found in category '{escape(category)}'.")
        return

    ctx.console.print(expense_table(f"🏷️ {escape(category)}", matches))
    ctx.console.print(f"[bold]Total: {sum(e.amount for e in matches):.2f}[/bold]")


def month_command(ctx: AppContext, reference_time: Optional[datetime] = None) -> None:
    """Show the category breakdown of the current month."""
    summary = ctx.expenses.monthly_summary(reference_time)
    if summary is None:
        ctx.console.print("📭 No expenses this month.")
        return

    table = Table(title=f"📊 Summary for {summary.month:02d}/{summary.year}", title_justify="left")
    table.add_column("Category")
    table.add_column("Total", justify="right")
    table.add_column("Share", justify="right")
    for category, total in sorted(summary.totals.items(), key=lambda x: -x[1]):
        pct = (total / summary.total * 100) if summary.total > 0 else 0
        table.add_row(escape(category), f"{total:.2f}", f"{pct:.0f}%")
    ctx.console.print(table)
    ctx.console.print(f"[bold]Total: {summary.total:.2f}[/bold] ({summary.count} expenses)")


def delete_command(ctx: AppContext) -> None:
    """Delete the expense at the number shown by 'View expenses'."""
    if ctx.expenses.is_empty():
        ctx.console.print("📭 No expenses to delete.")
        return

    ctx.console.print(expense_table("📔 Your expenses", ctx.expenses.list_expenses()))
    raw = ctx.ask("Number of the expense to delete").strip()
    try:
        position = int(raw)
    except ValueError:
        ctx.warn("Please enter a valid number.")
        return

    try:
        removed = ctx.expenses.delete_at(position)
    except StorageError:
        ctx.warn("Expense deleted for this session, but the change could not be saved.")
        return

    if removed is None:
        ctx.warn(f"Invalid expense number. Choose between 1 and {ctx.expenses.count()}.")
        return
    ctx.success(f"Deleted expense: {removed.amount:.2f} in {escape(removed.category)}")
