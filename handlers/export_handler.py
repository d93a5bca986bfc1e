"""
handlers/export_handler.py
---------------------------
Handles the CSV export command.
Delegates to ExportService.
"""

from rich.markup import escape

from handlers.context import AppContext
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


def export_csv_command(ctx: AppContext) -> None:
    """Write every expense, in the current order, to the export file."""
    if ctx.expenses.is_empty():
        ctx.console.print("📭 No expenses to export.")
        return

    try:
        written = ctx.exports.export_csv(ctx.expenses.export_records(), ctx.export_file)
    except StorageError as e:
        logger.error(f"CSV export failed: {e}")
        ctx.warn(f"Could not export to {escape(ctx.export_file)}.")
        return
    ctx.success(f"Exported {written} expenses to {escape(ctx.export_file)}")
