"""
sloc - source lines of code, per language.

Classifies every line of every recognised file as code, comment or blank
with a single byte-level pass per file, then reports per-language totals.
"""

__version__ = "0.3"

from .counter import CountResult, count_paths
from .counting import CommentSyntax, LineCounts, classify
from .languages import DEFAULT_REGISTRY, Language, LanguageRegistry
from .stats import LanguageStats, StatsAggregator

__all__ = [
    "classify",  # Core classifier
    "count_paths",  # Main entry point
    "CountResult",
    "CommentSyntax",
    "LineCounts",
    "Language",
    "LanguageRegistry",
    "DEFAULT_REGISTRY",
    "LanguageStats",
    "StatsAggregator",
]
