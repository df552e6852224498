"""Aligned table formatter for sloc."""

import io

from rich import box
from rich.console import Console
from rich.table import Table

from ..stats import TOTAL_ROW, StatsAggregator
from .base import BaseFormatter

COLUMNS = ("Language", "Files", "Code", "Comment", "Blank", "Total")


class TableFormatter(BaseFormatter):
    """Right-aligned table, one row per language plus the Total row."""

    def __init__(self, width: int = 100):
        self.width = width

    def build_table(self, stats: StatsAggregator) -> Table:
        table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
        for column in COLUMNS:
            table.add_column(column, justify="right")
        for row in stats.rows():
            style = "bold" if row.name == TOTAL_ROW else None
            table.add_row(
                row.name,
                str(row.files),
                str(row.code),
                str(row.comment),
                str(row.blank),
                str(row.total),
                style=style,
            )
        return table

    def format(self, stats: StatsAggregator) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=self.width, color_system=None, highlight=False)
        console.print(self.build_table(stats))
        return buffer.getvalue()
