"""Per-language accumulation of line counts."""

from __future__ import annotations

from dataclasses import dataclass, replace
from threading import Lock
from typing import Optional

from .counting.models import LineCounts

TOTAL_ROW = "Total"


@dataclass
class LanguageStats:
    """Running totals for one language."""

    name: str
    files: int = 0
    code: int = 0
    comment: int = 0
    blank: int = 0
    total: int = 0

    def add_counts(self, counts: LineCounts, files: int = 1) -> None:
        self.files += files
        self.code += counts.code
        self.comment += counts.comment
        self.blank += counts.blank
        self.total += counts.total

    def add(self, other: LanguageStats) -> None:
        self.files += other.files
        self.code += other.code
        self.comment += other.comment
        self.blank += other.blank
        self.total += other.total

    @property
    def counts(self) -> LineCounts:
        return LineCounts(total=self.total, code=self.code, comment=self.comment, blank=self.blank)

    def as_dict(self) -> dict[str, int]:
        return {
            "files": self.files,
            "code": self.code,
            "comment": self.comment,
            "blank": self.blank,
            "total": self.total,
        }


def _sort_key(row: LanguageStats) -> tuple[int, str]:
    return (row.code, row.name)


class StatsAggregator:
    """Folds per-file LineCounts into per-language totals.

    Merges are serialised with a lock, so worker threads can share one
    aggregator.
    """

    def __init__(self) -> None:
        self._stats: dict[str, LanguageStats] = {}
        self._lock = Lock()

    def ensure(self, language: str) -> LanguageStats:
        """Create an empty bucket for ``language`` if there is none yet."""
        with self._lock:
            return self._ensure(language)

    def _ensure(self, language: str) -> LanguageStats:
        stats = self._stats.get(language)
        if stats is None:
            stats = LanguageStats(name=language)
            self._stats[language] = stats
        return stats

    def merge(self, language: str, counts: LineCounts, files: int = 1) -> None:
        with self._lock:
            self._ensure(language).add_counts(counts, files=files)

    def get(self, language: str) -> Optional[LanguageStats]:
        return self._stats.get(language)

    def languages(self) -> list[str]:
        return sorted(self._stats)

    def is_empty(self) -> bool:
        return not self._stats

    def total(self) -> LanguageStats:
        total = LanguageStats(name=TOTAL_ROW)
        with self._lock:
            for stats in self._stats.values():
                total.add(stats)
        return total

    def rows(self) -> list[LanguageStats]:
        """Language rows plus the Total row.

        Sorted by code lines descending, ties broken by name descending. The
        Total row is sorted along with the others.
        """
        total = self.total()
        with self._lock:
            rows = [replace(s) for s in self._stats.values()]
        rows.append(total)
        return sorted(rows, key=_sort_key, reverse=True)
