"""
File operations for sloc.

Content is always read as raw bytes; the classifier works on bytes and never
decodes.
"""

from pathlib import Path

from .exceptions import FileAccessError


def read_file_bytes(filepath: Path) -> bytes:
    """
    Read the full content of a file.

    Args:
        filepath: File to read

    Returns:
        File contents as bytes

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        with open(filepath, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, e.strerror or str(e)) from e
