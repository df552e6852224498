"""Counting-related exceptions: file access and language lookup."""

from pathlib import Path
from typing import List

from .base import SlocError


class AnalysisError(SlocError):
    """Base class for counting-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file or directory cannot be stat'ed, listed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnknownLanguageError(AnalysisError):
    """Raised when a language name is not in the registry."""

    def __init__(self, language: str, known_languages: List[str]):
        super().__init__(
            f"Unknown language: {language}",
            details={"language": language, "known": ", ".join(known_languages)},
        )
        self.language = language
        self.known_languages = known_languages
