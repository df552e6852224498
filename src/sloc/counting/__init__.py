"""Comment-aware line classification."""

from .engine import MarkerCursor, classify
from .models import CommentSyntax, LineCounts

__all__ = [
    "classify",
    "MarkerCursor",
    "CommentSyntax",
    "LineCounts",
]
