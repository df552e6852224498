"""Language table: which files count as which language, and how each one
writes comments.

Adding a new language:
  1. Pick (or add) a comment style below.
  2. Add a Language entry to LANGUAGES. A file may match several entries and
     is then counted once per matching language.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import PurePath
from typing import Union

from .counting.models import CommentSyntax
from .exceptions import InvalidConfigError, UnknownLanguageError

PathLike = Union[str, PurePath]


# ── Comment styles ─────────────────────────────────────────────────

NO_COMMENTS = CommentSyntax()
XML_COMMENTS = CommentSyntax(block_start=b"<!--", block_end=b"-->")
C_COMMENTS = CommentSyntax(line=b"//", block_start=b"/*", block_end=b"*/")
CSS_COMMENTS = CommentSyntax(block_start=b"/*", block_end=b"*/")
SH_COMMENTS = CommentSyntax(line=b"#")
SEMI_COMMENTS = CommentSyntax(line=b";")
HASKELL_COMMENTS = CommentSyntax(line=b"--", block_start=b"{-", block_end=b"-}", nesting=True)
ML_COMMENTS = CommentSyntax(block_start=b"(*", block_end=b"*)")
SQL_COMMENTS = CommentSyntax(line=b"--", block_start=b"/*", block_end=b"*/")
LUA_COMMENTS = CommentSyntax(line=b"--", block_start=b"--[[", block_end=b"]]")
PYTHON_COMMENTS = CommentSyntax(line=b"#", block_start=b'"""', block_end=b'"""')
MATLAB_COMMENTS = CommentSyntax(line=b"%", block_start=b"%{", block_end=b"%}")
ERLANG_COMMENTS = CommentSyntax(line=b"%")
RUBY_COMMENTS = CommentSyntax(line=b"#", block_start=b"=begin", block_end=b"=end")
COFFEE_COMMENTS = CommentSyntax(line=b"#", block_start=b"###", block_end=b"###")
# POD and __END__ sections are not recognised.
PERL_COMMENTS = CommentSyntax(line=b"#")


# ── File matchers ──────────────────────────────────────────────────


def _name(path: PathLike) -> str:
    return PurePath(path).name


@dataclass(frozen=True)
class ExtensionMatcher:
    """Matches on the final extension, case-sensitively (``.R`` != ``.r``)."""

    extensions: tuple[str, ...]

    def matches(self, path: PathLike) -> bool:
        return PurePath(path).suffix in self.extensions


@dataclass(frozen=True)
class NameMatcher:
    """Matches on the exact file name (e.g. ``Makefile``)."""

    names: tuple[str, ...]

    def matches(self, path: PathLike) -> bool:
        return _name(path) in self.names


@dataclass(frozen=True)
class SuffixMatcher:
    """Matches when the file name ends with one of ``suffixes``."""

    suffixes: tuple[str, ...]

    def matches(self, path: PathLike) -> bool:
        name = _name(path)
        return any(name.endswith(s) for s in self.suffixes)


Matcher = Union[ExtensionMatcher, NameMatcher, SuffixMatcher]


def ext(*extensions: str) -> ExtensionMatcher:
    return ExtensionMatcher(tuple(extensions))


def named(*names: str) -> NameMatcher:
    return NameMatcher(tuple(names))


def suffixed(*suffixes: str) -> SuffixMatcher:
    return SuffixMatcher(tuple(suffixes))


# ── Languages ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Language:
    """A named bucket of files sharing one comment syntax."""

    name: str
    matcher: Matcher
    syntax: CommentSyntax

    def matches(self, path: PathLike) -> bool:
        return self.matcher.matches(path)


class LanguageRegistry:
    """Ordered set of languages; a path may match any number of them."""

    def __init__(self, languages: Iterable[Language]):
        self._languages: list[Language] = []
        self._by_name: dict[str, Language] = {}
        for language in languages:
            if language.name in self._by_name:
                raise InvalidConfigError(
                    "languages", language.name, "language registered more than once"
                )
            self._languages.append(language)
            self._by_name[language.name] = language

    def match(self, path: PathLike) -> list[Language]:
        """Return every language that applies to ``path``, in table order."""
        return [lang for lang in self._languages if lang.matches(path)]

    def get(self, name: str) -> Language:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownLanguageError(name, self.names()) from None

    def names(self) -> list[str]:
        return [lang.name for lang in self._languages]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)


LANGUAGES = [
    Language("Thrift", ext(".thrift"), C_COMMENTS),
    Language("C", ext(".c", ".h"), C_COMMENTS),
    Language("C++", ext(".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"), C_COMMENTS),
    Language("C#", ext(".cs"), C_COMMENTS),
    Language("Go", ext(".go"), C_COMMENTS),
    # Test files are counted under both Go and GoTest.
    Language("GoTest", suffixed("_test.go"), C_COMMENTS),
    Language("Rust", ext(".rs", ".rc"), C_COMMENTS),
    Language("Scala", ext(".scala"), C_COMMENTS),
    Language("Java", ext(".java"), C_COMMENTS),
    Language("YACC", ext(".y"), C_COMMENTS),
    Language("Lex", ext(".l"), C_COMMENTS),
    Language("Lua", ext(".lua"), LUA_COMMENTS),
    Language("SQL", ext(".sql"), SQL_COMMENTS),
    Language("Haskell", ext(".hs", ".lhs"), HASKELL_COMMENTS),
    Language("ML", ext(".ml", ".mli"), ML_COMMENTS),
    Language("Perl", ext(".pl", ".pm"), PERL_COMMENTS),
    Language("PHP", ext(".php"), C_COMMENTS),
    Language("Shell", ext(".sh"), SH_COMMENTS),
    Language("Bash", ext(".bash"), SH_COMMENTS),
    Language("R", ext(".r", ".R"), SH_COMMENTS),
    Language("Tcl", ext(".tcl"), SH_COMMENTS),
    Language("MATLAB", ext(".m"), MATLAB_COMMENTS),
    Language("Ruby", ext(".rb"), RUBY_COMMENTS),
    Language("Python", ext(".py"), PYTHON_COMMENTS),
    Language("Assembly", ext(".asm", ".s"), SEMI_COMMENTS),
    Language("Lisp", ext(".lsp", ".lisp"), SEMI_COMMENTS),
    Language("Scheme", ext(".scm", ".scheme"), SEMI_COMMENTS),
    Language("Make", named("makefile", "Makefile", "MAKEFILE"), SH_COMMENTS),
    Language("CMake", named("CMakeLists.txt"), SH_COMMENTS),
    Language("Jam", named("Jamfile", "Jamrules"), SH_COMMENTS),
    Language("Markdown", ext(".md"), NO_COMMENTS),
    Language("HAML", ext(".haml"), NO_COMMENTS),
    Language("SASS", ext(".sass"), CSS_COMMENTS),
    Language("SCSS", ext(".scss"), CSS_COMMENTS),
    Language("HTML", ext(".htm", ".html", ".xhtml"), XML_COMMENTS),
    Language("XML", ext(".xml"), XML_COMMENTS),
    Language("CSS", ext(".css"), CSS_COMMENTS),
    Language("JavaScript", ext(".js"), C_COMMENTS),
    # Only entry for .ts; a second "Typescript" entry used to count each file twice
    Language("TypeScript", ext(".ts"), C_COMMENTS),
    Language("CoffeeScript", ext(".coffee"), COFFEE_COMMENTS),
    Language("Erlang", ext(".erl"), ERLANG_COMMENTS),
]

DEFAULT_REGISTRY = LanguageRegistry(LANGUAGES)
