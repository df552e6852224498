"""CLI entry point."""

import typer

app = typer.Typer(
    name="sloc",
    help="sloc - count source lines of code, comments and blanks per language",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .count import main  # noqa: F401, E402

__all__ = ["app", "main"]
