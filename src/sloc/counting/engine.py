"""Single-pass line classifier.

Walks the raw bytes of one file exactly once and sorts every completed line
into code, comment or blank. There is no tokenizer: three independent
partial-match cursors (line marker, block start, block end) advance over the
same byte stream, and the comment state they produce is sampled at each
newline.

Known imprecisions, matching historical reports:

* A line holding both code and a comment counts as a comment line.
* A failed partial match resets its cursor to zero without re-examining the
  current byte, so self-overlapping markers can be missed.
* A line on which a block comment closes counts as code (the comment state is
  sampled at the newline, after the close).
"""

from __future__ import annotations

from .models import CommentSyntax, LineCounts

_NEWLINE = 0x0A
_BLANK_BYTES = frozenset(b" \t\n\r")


class MarkerCursor:
    """Tracks how many leading bytes of ``marker`` have matched so far."""

    __slots__ = ("marker", "position")

    def __init__(self, marker: bytes):
        self.marker = marker
        self.position = 0

    def advance(self, byte: int) -> bool:
        """Feed one byte; return True when the marker has just completed."""
        marker = self.marker
        if marker and byte == marker[self.position]:
            self.position += 1
            if self.position == len(marker):
                self.position = 0
                return True
            return False
        self.position = 0
        return False

    def reset(self) -> None:
        self.position = 0


def classify(content: bytes, syntax: CommentSyntax) -> LineCounts:
    """Classify every newline-terminated line of ``content``.

    Args:
        content: Full raw content of one file.
        syntax: Comment delimiters of the language the file is counted as.

    Returns:
        LineCounts for the completed lines. A trailing line without a final
        newline is not counted.
    """
    line_cursor = MarkerCursor(syntax.line)
    start_cursor = MarkerCursor(syntax.block_start)
    end_cursor = MarkerCursor(syntax.block_end)
    nesting = syntax.nesting

    depth = 0
    in_line_comment = False
    blank = True

    total = code = comment = blanks = 0

    for byte in content:
        # Line comments cannot start inside a block comment.
        if not in_line_comment and depth == 0:
            if line_cursor.advance(byte):
                in_line_comment = True
        else:
            line_cursor.reset()

        if not in_line_comment:
            if start_cursor.advance(byte):
                depth += 1
                if depth > 1 and not nesting:
                    depth = 1
        else:
            start_cursor.reset()

        if not in_line_comment and depth > 0:
            if end_cursor.advance(byte):
                depth -= 1
        else:
            end_cursor.reset()

        if byte not in _BLANK_BYTES:
            blank = False

        if byte == _NEWLINE:
            total += 1
            if depth > 0 or in_line_comment:
                in_line_comment = False
                comment += 1
            elif blank:
                blanks += 1
            else:
                code += 1
            blank = True

    return LineCounts(total=total, code=code, comment=comment, blank=blanks)
