"""JSON formatter for sloc."""

import json

from ..stats import StatsAggregator
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Object keyed by language name; no Total entry."""

    def format(self, stats: StatsAggregator) -> str:
        data = {}
        for name in stats.languages():
            s = stats.get(name)
            data[name] = {
                "FileCount": s.files,
                "TotalLines": s.total,
                "CodeLines": s.code,
                "BlankLines": s.blank,
                "CommentLines": s.comment,
            }
        return json.dumps(data, indent=2) + "\n"
