"""
handlers/start_handler.py
--------------------------
Welcome banner and the main menu.
"""

from rich.panel import Panel
from rich.table import Table

from handlers.context import AppContext

WELCOME_TEXT = (
    "💰 [bold]Expense Tracker[/bold]\n"
    "Record what you spend, check it against your budgets,\n"
    "and export it whenever you like."
)

MENU_ITEMS = [
    ("1", "Add expense"),
    ("2", "View expenses"),
    ("3", "Sort expenses"),
    ("4", "Filter by category"),
    ("5", "Monthly summary"),
    ("6", "Set budget"),
    ("7", "Budget status"),
    ("8", "Delete expense"),
    ("9", "Export to CSV"),
    ("10", "Monthly chart"),
    ("0", "Save and exit"),
]


def welcome(ctx: AppContext) -> None:
    """Print the welcome banner with the number of loaded expenses."""
    ctx.console.print(Panel.fit(WELCOME_TEXT, border_style="cyan"))
    ctx.console.print(f"Loaded [bold]{ctx.expenses.count()}[/bold] expenses.")


def show_menu(ctx: AppContext) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    for key, label in MENU_ITEMS:
        table.add_row(f"[cyan]{key}[/cyan]", label)
    ctx.console.print()
    ctx.console.print(table)
