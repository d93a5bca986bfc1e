"""
services/chart_service.py
--------------------------
Generates chart images for expense analysis.
Uses matplotlib to create a pie chart of a monthly summary and returns it as a BytesIO buffer.
"""

import io
from pathlib import Path
from typing import Optional, Union

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend, nothing is shown on screen
import matplotlib.pyplot as plt

from models.report import MonthlySummary
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

plt.rcParams["font.family"] = "DejaVu Sans"
plt.rcParams["figure.facecolor"] = "#1a1a2e"
plt.rcParams["text.color"] = "#e0e0e0"
plt.rcParams["axes.facecolor"] = "#1a1a2e"

_COLORS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4",
    "#FFEAA7", "#DDA0DD", "#98D8C8", "#F7DC6F",
    "#BB8FCE", "#85C1E9", "#F1948A", "#82E0AA",
]


class ChartService:
    """Generates visual charts for expense data."""

    def generate_monthly_pie(self, summary: Optional[MonthlySummary]) -> Optional[io.BytesIO]:
        """
        Generate a pie chart of a month's spending by category.

        Categories whose total is zero or negative cannot be drawn as a slice
        and are left out.

        Returns:
            BytesIO buffer with PNG image, or None if no data.
        """
        if summary is None:
            return None
        slices = [(cat, total) for cat, total in summary.totals.items() if total > 0]
        if not slices:
            return None

        labels = [cat for cat, _ in slices]
        values = [total for _, total in slices]
        colors = [_COLORS[i % len(_COLORS)] for i in range(len(values))]

        fig, ax = plt.subplots(figsize=(8, 6))

        wedges, _texts, autotexts = ax.pie(
            values,
            labels=None,
            autopct=lambda pct: f"{pct:.1f}%",
            colors=colors,
            startangle=90,
            pctdistance=0.82,
            wedgeprops=dict(width=0.5, edgecolor="#1a1a2e", linewidth=2),
        )

        for autotext in autotexts:
            autotext.set_color("white")
            autotext.set_fontsize(10)
            autotext.set_fontweight("bold")

        ax.legend(
            wedges, [f"{l}: {v:.2f}" for l, v in zip(labels, values)],
            loc="center left",
            bbox_to_anchor=(1, 0, 0.5, 1),
            fontsize=10,
            frameon=False,
        )

        ax.set_title(
            f"Spending by category - {summary.month:02d}/{summary.year}\nTotal: {summary.total:.2f}",
            fontsize=14,
            fontweight="bold",
            pad=20,
        )

        plt.tight_layout()

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=150, bbox_inches="tight",
                    facecolor=fig.get_facecolor())
        buf.seek(0)
        plt.close(fig)

        logger.info(f"Generated pie chart for {summary.month:02d}/{summary.year}")
        return buf

    def save_monthly_pie(self, summary: Optional[MonthlySummary], path: Union[str, Path]) -> bool:
        """
        Write the monthly pie chart to a PNG file.

        Returns:
            False when there was nothing to draw.

        Raises:
            StorageError: If the file cannot be written.
        """
        buf = self.generate_monthly_pie(summary)
        if buf is None:
            return False
        target = Path(path)
        try:
            target.write_bytes(buf.getvalue())
        except OSError as e:
            logger.error(f"Failed to write chart to {target}: {e}")
            raise StorageError(f"Could not write {target}: {e}") from e
        return True
