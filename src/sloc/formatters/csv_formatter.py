"""CSV formatter for sloc."""

import csv
import io

from ..stats import StatsAggregator
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render the sorted rows, Total included, as CSV."""

    def format(self, stats: StatsAggregator) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(["language", "files", "code", "comment", "blank", "total"])
        for row in stats.rows():
            writer.writerow([row.name, row.files, row.code, row.comment, row.blank, row.total])
        return output.getvalue()
