"""Recursive file discovery.

Roots are used as given. Below a root, hidden entries are skipped, symlinks
are followed (unless disabled), and a directory that contains the exclude
marker file is dropped together with its whole subtree.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .config import DEFAULT_CONFIG, SlocConfig
from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class WalkResult:
    """Files found by a walk plus the paths that could not be visited."""

    files: list[Path] = field(default_factory=list)
    errors: list[FileAccessError] = field(default_factory=list)


class FileWalker:
    """Depth-first walker honouring the exclude marker and hidden prefix.

    Every root is walked independently, so a directory given twice (or nested
    inside another root) is counted twice. Only directories on the current
    descent chain are refused, which stops symlink loops.
    """

    def __init__(self, config: SlocConfig = DEFAULT_CONFIG):
        self.config = config

    def walk(self, paths: Iterable[Union[str, Path]]) -> WalkResult:
        result = WalkResult()
        for root in paths:
            self._add(Path(root), result, frozenset(), is_root=True)
        logger.debug(f"Walk found {len(result.files)} files, {len(result.errors)} errors")
        return result

    def _record(self, result: WalkResult, path: Path, action: str, exc: OSError) -> None:
        error = FileAccessError(path, f"{action}: {exc.strerror or exc}")
        logger.warning(str(error))
        result.errors.append(error)

    def _add(
        self,
        path: Path,
        result: WalkResult,
        ancestors: frozenset[tuple[int, int]],
        is_root: bool = False,
    ) -> None:
        try:
            if not is_root and not self.config.follow_symlinks and path.is_symlink():
                logger.debug(f"Skipped symlink: {path}")
                return
            st = path.stat()
        except OSError as e:
            self._record(result, path, "stat", e)
            return

        if stat.S_ISDIR(st.st_mode):
            self._add_directory(path, st, result, ancestors)
        elif stat.S_ISREG(st.st_mode):
            result.files.append(path)
        else:
            logger.debug(f"Skipped non-regular file: {path} (mode {stat.filemode(st.st_mode)})")

    def _add_directory(
        self,
        path: Path,
        st: os.stat_result,
        result: WalkResult,
        ancestors: frozenset[tuple[int, int]],
    ) -> None:
        key = (st.st_dev, st.st_ino)
        if key in ancestors:
            logger.debug(f"Skipped symlink loop: {path}")
            return
        ancestors = ancestors | {key}

        try:
            entries = sorted(path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            self._record(result, path, "list directory", e)
            return

        if any(entry.name == self.config.exclude_marker for entry in entries):
            logger.debug(f"Excluded by {self.config.exclude_marker}: {path}")
            return

        for entry in entries:
            if entry.name.startswith(self.config.hidden_prefix):
                continue
            self._add(entry, result, ancestors)


def walk_paths(paths: Iterable[Union[str, Path]], config: SlocConfig = DEFAULT_CONFIG) -> WalkResult:
    """Collect every countable file under ``paths``."""
    return FileWalker(config).walk(paths)
