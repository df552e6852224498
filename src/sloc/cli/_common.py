"""Shared CLI helpers."""

from rich.console import Console
from rich.table import Table

from ..counting.models import CommentSyntax
from ..languages import ExtensionMatcher, LanguageRegistry, NameMatcher

console = Console(highlight=False)


def describe_marker(marker: bytes) -> str:
    return marker.decode("utf-8", errors="replace") if marker else "-"


def describe_matcher(matcher) -> str:
    if isinstance(matcher, ExtensionMatcher):
        return " ".join(matcher.extensions)
    if isinstance(matcher, NameMatcher):
        return " ".join(matcher.names)
    return " ".join(f"*{s}" for s in matcher.suffixes)


def describe_block(syntax: CommentSyntax) -> str:
    if not syntax.has_block_comments:
        return "-"
    block = f"{describe_marker(syntax.block_start)} {describe_marker(syntax.block_end)}"
    return f"{block} (nested)" if syntax.nesting else block


def languages_table(registry: LanguageRegistry) -> Table:
    table = Table(title="Supported languages", title_justify="left")
    table.add_column("Language", style="bold cyan")
    table.add_column("Files")
    table.add_column("Line")
    table.add_column("Block")
    for language in registry:
        table.add_row(
            language.name,
            describe_matcher(language.matcher),
            describe_marker(language.syntax.line),
            describe_block(language.syntax),
        )
    return table
