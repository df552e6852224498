"""Base formatter interface for sloc reports."""

from abc import ABC, abstractmethod

from ..stats import StatsAggregator


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, stats: StatsAggregator) -> None:
        """Write the report to stdout."""
        print(self.format(stats), end="")

    @abstractmethod
    def format(self, stats: StatsAggregator) -> str:
        """Return formatted string representation of the report."""
