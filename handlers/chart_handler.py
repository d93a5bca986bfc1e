"""
handlers/chart_handler.py
--------------------------
Handles chart generation.
Delegates to ChartService and writes the image next to the data file.
"""

from rich.markup import escape

from handlers.context import AppContext
from utils.errors import StorageError


def chart_command(ctx: AppContext) -> None:
    """Save a pie chart of this month's spending by category."""
    summary = ctx.expenses.monthly_summary()
    try:
        saved = ctx.charts.save_monthly_pie(summary, ctx.chart_file)
    except StorageError:
        ctx.warn(f"Could not write the chart to {escape(ctx.chart_file)}.")
        return

    if not saved:
        ctx.console.print("📭 No spending to chart this month.")
        return
    ctx.success(f"Chart saved to {escape(ctx.chart_file)}")
