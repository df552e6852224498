"""Main counting command."""

import cProfile
from pathlib import Path
from typing import List, Optional

import click
import typer

from .. import __version__
from ..config import OUTPUT_FORMATS, load_config
from ..counter import count_paths
from ..exceptions import SlocError
from ..formatters import get_formatter
from ..languages import DEFAULT_REGISTRY
from ..logging_config import setup_logging
from . import app
from ._common import console, languages_table


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sloc {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to count (default: current directory)",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="JSON-format output (same as --format json)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: table | json | csv",
        click_type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    ),
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        help="Display version info and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    list_languages: bool = typer.Option(
        False,
        "--list-languages",
        help="Show recognised languages and their comment syntax, then exit",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect, 1 = sequential)",
        min=1,
        max=64,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped files and walk details",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    cpuprofile: Optional[Path] = typer.Option(
        None,
        "--cpuprofile",
        help="Write a cProfile dump of the run to this file",
        dir_okay=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Count code, comment and blank lines per language.

    [bold cyan]Examples:[/bold cyan]

      sloc

      sloc src tests --json

      sloc --format csv > sloc.csv
    """
    try:
        logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)
    except OSError as e:
        typer.echo(f"error: cannot open log file: {e}", err=True)
        raise typer.Exit(1)

    if list_languages:
        console.print(languages_table(DEFAULT_REGISTRY))
        raise typer.Exit(0)

    if json_output:
        fmt = "json"

    profiler = None
    try:
        settings = load_config(
            config_file=config,
            workers=workers,
            output_format=fmt.lower() if fmt else None,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=log_file,
        )
        formatter = get_formatter(settings.output_format)

        if cpuprofile is not None:
            profiler = cProfile.Profile()
            profiler.enable()

        result = count_paths(paths or [Path(".")], settings)

        if profiler is not None:
            profiler.disable()
            profiler.dump_stats(str(cpuprofile))
            logger.info(f"CPU profile written to {cpuprofile}")

        formatter.render(result.stats)

        if result.errors:
            logger.info(f"{len(result.errors)} path(s) could not be read")

    except SlocError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Counting interrupted by user")
        raise typer.Exit(130)

    except OSError as e:
        # cProfile dump target not writable
        logger.error(f"error: {e}")
        raise typer.Exit(1)

    finally:
        if profiler is not None:
            profiler.disable()
