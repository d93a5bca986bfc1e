"""
main.py
-------
Entry point for the console expense tracker.

Responsibilities:
    - Build the repository and services from config.
    - Show the menu and dispatch each choice to its handler.
    - Save once more on exit (including Ctrl+C / end of input).
"""

from typing import Callable, Optional

from rich.console import Console

import config
from handlers.budget_handler import budget_command, budget_status_command
from handlers.chart_handler import chart_command
from handlers.context import AppContext
from handlers.expense_handler import (
    add_command,
    delete_command,
    filter_command,
    month_command,
    sort_command,
    view_command,
)
from handlers.export_handler import export_csv_command
from handlers.start_handler import show_menu, welcome
from models.category import DEFAULT_CATEGORIES
from repositories.expense_repo import ExpenseRepository
from services.budget_service import BudgetService
from services.expense_service import ExpenseService
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS: dict[str, Callable[[AppContext], None]] = {
    "1": add_command,
    "2": view_command,
    "3": sort_command,
    "4": filter_command,
    "5": month_command,
    "6": budget_command,
    "7": budget_status_command,
    "8": delete_command,
    "9": export_csv_command,
    "10": chart_command,
}

EXIT_CHOICE = "0"


def build_context(console: Optional[Console] = None) -> AppContext:
    """Wire the repository, services and settings for one session."""
    repo = ExpenseRepository(config.EXPENSES_FILE)
    budgets = BudgetService(warning_percent=config.BUDGET_WARNING_PERCENT)
    return AppContext(
        console=console or Console(),
        expenses=ExpenseService(repo, budgets),
        export_file=config.EXPORT_FILE,
        chart_file=config.CHART_FILE,
        category_picker=config.CATEGORY_PICKER,
        categories=config.EXPENSE_CATEGORIES or list(DEFAULT_CATEGORIES),
    )


def save_and_exit(ctx: AppContext) -> bool:
    """Save before leaving. Returns False when the save failed."""
    try:
        ctx.expenses.save()
    except StorageError:
        ctx.warn("Could not save your expenses. Choose 0 to try again.")
        return False
    ctx.console.print("👋 Expenses saved. Goodbye!")
    return True


def run(ctx: AppContext) -> None:
    """Main loop: runs until the user picks 'Save and exit' or input ends."""
    welcome(ctx)
    while True:
        show_menu(ctx)
        try:
            choice = ctx.ask("Choose an option").strip()
        except EOFError:
            # No more input can arrive, so a failed save cannot be retried.
            ctx.console.print()
            save_and_exit(ctx)
            return
        except KeyboardInterrupt:
            ctx.console.print()
            if save_and_exit(ctx):
                return
            continue

        if choice == EXIT_CHOICE:
            if save_and_exit(ctx):
                return
            continue

        handler = COMMANDS.get(choice)
        if handler is None:
            ctx.warn("Invalid choice. Please pick one of the menu numbers.")
            continue

        try:
            handler(ctx)
        except (KeyboardInterrupt, EOFError):
            ctx.console.print()
            ctx.warn("Cancelled.")


def main() -> None:
    """Initialize and run the tracker."""
    logger.info(f"Starting expense tracker with data file {config.EXPENSES_FILE}")
    run(build_context())
    logger.info("Expense tracker stopped.")


if __name__ == "__main__":
    main()
