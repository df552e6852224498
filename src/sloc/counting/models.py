"""Data models for the counting layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Marker = Union[bytes, str, None]


def _as_marker(value: Marker) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class CommentSyntax:
    """How comments are delimited in one language.

    Markers are literal byte sequences compared byte-for-byte. An empty
    marker means the language has no such comment form and never matches.
    ``nesting`` makes a ``block_start`` inside an open block comment
    increase the depth instead of being absorbed.
    """

    line: bytes = b""
    block_start: bytes = b""
    block_end: bytes = b""
    nesting: bool = False

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "line", _as_marker(self.line))
        object.__setattr__(self, "block_start", _as_marker(self.block_start))
        object.__setattr__(self, "block_end", _as_marker(self.block_end))

    @property
    def has_line_comments(self) -> bool:
        return bool(self.line)

    @property
    def has_block_comments(self) -> bool:
        return bool(self.block_start) and bool(self.block_end)


@dataclass(frozen=True)
class LineCounts:
    """Line totals produced by one classification pass."""

    total: int = 0
    code: int = 0
    comment: int = 0
    blank: int = 0

    def __add__(self, other: LineCounts) -> LineCounts:
        if not isinstance(other, LineCounts):
            return NotImplemented
        return LineCounts(
            total=self.total + other.total,
            code=self.code + other.code,
            comment=self.comment + other.comment,
            blank=self.blank + other.blank,
        )

    def is_consistent(self) -> bool:
        """Every line lands in exactly one category."""
        return self.code + self.comment + self.blank == self.total

    def as_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "code": self.code,
            "comment": self.comment,
            "blank": self.blank,
        }
