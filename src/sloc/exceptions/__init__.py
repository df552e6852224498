"""Exception hierarchy for sloc."""

from .analysis import AnalysisError, FileAccessError, UnknownLanguageError
from .base import SlocError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "SlocError",
    "AnalysisError",
    "FileAccessError",
    "UnknownLanguageError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
]
