"""Configuration loading and management for sloc.

Configuration sources are merged in priority order:
    1. Defaults (defined in SlocConfig)
    2. Global config (~/.sloc.toml)
    3. Project config (./sloc.toml)
    4. Explicit config file
    5. Environment variables (SLOC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
    >>> config.exclude_marker
    '.nosloc'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError, InvalidPathError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["table", "json", "csv"]

OUTPUT_FORMATS = ("table", "json", "csv")
VERBOSITIES = ("quiet", "normal", "verbose")

GLOBAL_CONFIG_NAME = ".sloc.toml"
PROJECT_CONFIG_NAME = "sloc.toml"
ENV_PREFIX = "SLOC_"


@dataclass(frozen=True)
class SlocConfig:
    """Settings for one counting run.

    Attributes:
        Traversal:
            exclude_marker: A directory holding a file with this name is skipped
                together with everything below it
            hidden_prefix: Entries whose name starts with this are skipped
            follow_symlinks: Descend into symlinked files and directories (loops
                are cut at the first repeated directory)

        Performance:
            workers: Parallel counting threads (None = auto-detect, 1 = sequential)

        Output:
            output_format: table, json or csv
            verbosity: Logging verbosity level
    """

    # Traversal
    exclude_marker: str = ".nosloc"
    hidden_prefix: str = "."
    follow_symlinks: bool = True

    # Performance
    workers: Optional[int] = None

    # Output
    output_format: OutputFormat = "table"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if not self.exclude_marker:
            raise InvalidConfigError("exclude_marker", self.exclude_marker, "must not be empty")
        if not self.hidden_prefix:
            raise InvalidConfigError("hidden_prefix", self.hidden_prefix, "must not be empty")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITIES)}"
            )


DEFAULT_CONFIG = SlocConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> SlocConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated SlocConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.is_file():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.is_file():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.is_file():
            raise InvalidPathError(config_file, "config file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(SlocConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    try:
        return SlocConfig(**merged)
    except TypeError as e:
        # Wrongly typed value from a TOML file
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SLOC_* environment variables.

    Supported environment variables:
        SLOC_EXCLUDE_MARKER: str
        SLOC_HIDDEN_PREFIX: str
        SLOC_FOLLOW_SYMLINKS: bool (true/false/1/0)
        SLOC_WORKERS: int
        SLOC_OUTPUT_FORMAT: table/json/csv
        SLOC_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any SLOC_* vars found.
    """
    type_hints = get_type_hints(SlocConfig)

    result: dict[str, Any] = {}

    for field_name in SlocConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # str and Literal aliases are validated by SlocConfig itself
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its ``[sloc]`` table (or the whole document)."""
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("sloc", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [sloc] must be a table")
    return section
