"""
handlers/context.py
-------------------
Everything a handler needs for one interactive session, built once in main.py.
"""

from dataclasses import dataclass, field

from rich.console import Console
from rich.prompt import Prompt

from models.category import DEFAULT_CATEGORIES
from services.chart_service import ChartService
from services.expense_service import ExpenseService
from services.export_service import ExportService


@dataclass
class AppContext:
    """
    Session state passed to every handler.

    Attributes:
        console: Where all output is rendered.
        expenses: The expense store for this session.
        exports: CSV writer.
        charts: Chart renderer.
        export_file: Destination of "export to CSV".
        chart_file: Destination of "monthly chart".
        category_picker: 'free' (type a category) or 'list' (pick by number).
        categories: The numbered list used by the 'list' picker.
    """
    console: Console
    expenses: ExpenseService
    exports: ExportService = field(default_factory=ExportService)
    charts: ChartService = field(default_factory=ChartService)
    export_file: str = "expenses.csv"
    chart_file: str = "monthly_summary.png"
    category_picker: str = "free"
    categories: list[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))

    def ask(self, question: str, **kwargs) -> str:
        """Prompt for one line of input."""
        return Prompt.ask(question, console=self.console, **kwargs)

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✅ {message}[/green]")
