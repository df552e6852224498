"""Counting pipeline: walk -> match -> read -> classify -> aggregate."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_CONFIG, SlocConfig
from .counting.engine import classify
from .exceptions import FileAccessError
from .file_ops import read_file_bytes
from .languages import DEFAULT_REGISTRY, LanguageRegistry
from .logging_config import get_logger
from .stats import StatsAggregator
from .walker import walk_paths

logger = get_logger(__name__)

# Below this many files the thread pool costs more than it saves.
PARALLEL_MIN_FILES = 32


@dataclass
class CountResult:
    """Aggregated stats plus every per-path error met along the way."""

    stats: StatsAggregator = field(default_factory=StatsAggregator)
    errors: list[FileAccessError] = field(default_factory=list)
    files_seen: int = 0


def count_file(
    path: Path,
    aggregator: StatsAggregator,
    registry: LanguageRegistry = DEFAULT_REGISTRY,
) -> int:
    """Count one file under every language it matches.

    Returns:
        Number of languages the file was counted under.

    Raises:
        FileAccessError: If the file matched a language but could not be read.
    """
    languages = registry.match(path)
    if not languages:
        return 0

    for language in languages:
        aggregator.ensure(language.name)

    content = read_file_bytes(path)
    for language in languages:
        aggregator.merge(language.name, classify(content, language.syntax))
    return len(languages)


def _resolve_workers(workers: Optional[int]) -> int:
    if workers is not None:
        return workers
    return min(32, (os.cpu_count() or 1) + 4)


def count_files(
    files: Sequence[Path],
    aggregator: StatsAggregator,
    registry: LanguageRegistry = DEFAULT_REGISTRY,
    workers: Optional[int] = None,
) -> list[FileAccessError]:
    """Count ``files`` into ``aggregator``; return the read errors."""
    errors: list[FileAccessError] = []
    max_workers = _resolve_workers(workers)

    if max_workers <= 1 or len(files) < PARALLEL_MIN_FILES:
        for path in files:
            try:
                count_file(path, aggregator, registry)
            except FileAccessError as e:
                logger.warning(str(e))
                errors.append(e)
        return errors

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(count_file, path, aggregator, registry): path for path in files}
        for future in as_completed(futures):
            try:
                future.result()
            except FileAccessError as e:
                logger.warning(str(e))
                errors.append(e)

    # as_completed order is arbitrary
    errors.sort(key=lambda e: str(e.filepath))
    return errors


def count_paths(
    paths: Iterable[Union[str, Path]],
    config: SlocConfig = DEFAULT_CONFIG,
    registry: LanguageRegistry = DEFAULT_REGISTRY,
) -> CountResult:
    """Walk ``paths`` and count every recognised file.

    Unreadable paths are logged and collected in ``CountResult.errors``; they
    never abort the run. Files no language claims are skipped silently.
    """
    walked = walk_paths(paths, config)
    result = CountResult(errors=list(walked.errors), files_seen=len(walked.files))
    result.errors.extend(
        count_files(walked.files, result.stats, registry, workers=config.workers)
    )
    logger.debug(
        f"Counted {len(walked.files)} files into {len(result.stats.languages())} languages"
    )
    return result
