"""Lark Transformer that converts one parsed template line into the line model."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from nestyle.config import DEFAULT_OPTIONS, CompilerOptions
from nestyle.errors import ParseError
from nestyle.model.content import Apply, Content, Contents, Leaf, Raw, Url, UrlParam, Var
from nestyle.model.diagnostic import Diagnostic, Severity
from nestyle.model.lines import IndentedLine, Line, MixinLine, PairLine, SingleLine

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)

# Human-readable names for grammar terminals, used in error messages.
_TERMINAL_NAMES: dict[str, str] = {
    "$END": "end of line",
    "IDENT": "an identifier",
    "KEY_TEXT": "text",
    "VALUE_TEXT": "text",
    "_CARET": "'^'",
    "_COLON": "':'",
    "_DOLLAR2": "'$$'",
    "_DOLLAR": "'$'",
    "_AT2": "'@@'",
    "_AT_QUERY": "'@?'",
    "_AT": "'@'",
    "_LPAR": "'('",
    "_RPAR": "')'",
    "_DELIM": "'.' or a space",
}


def _as_contents(items: list[object]) -> Contents:
    """Turn raw text tokens into ``Raw`` segments, keeping references as-is."""
    contents: list[Content] = []
    for item in items:
        if isinstance(item, Token):
            contents.append(Raw(str(item)))
        else:
            contents.append(item)  # type: ignore[arg-type]
    return tuple(contents)


class LineTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree for one line into a ``Line``."""

    # ---- deref ----

    def leaf(self, items: list[Token]) -> Leaf:
        return Leaf(str(items[0]))

    def apply(self, items: list[object]) -> Apply:
        return Apply(items[0], items[1])  # type: ignore[arg-type]

    # ---- content ----

    def dollar(self, items: list[object]) -> Raw:
        return Raw("$")

    def at(self, items: list[object]) -> Raw:
        return Raw("@")

    def var(self, items: list[object]) -> Var:
        return Var(items[0])  # type: ignore[arg-type]

    def url(self, items: list[object]) -> Url:
        return Url(items[0])  # type: ignore[arg-type]

    def url_param(self, items: list[object]) -> UrlParam:
        return UrlParam(items[0])  # type: ignore[arg-type]

    def key(self, items: list[object]) -> Contents:
        return _as_contents(items)

    def value(self, items: list[object]) -> Contents:
        return _as_contents(items)

    # ---- lines ----

    def mixin_line(self, items: list[object]) -> MixinLine:
        return MixinLine(items[0])  # type: ignore[arg-type]

    def pair_line(self, items: list[object]) -> PairLine:
        return PairLine(key=items[0], value=items[1])  # type: ignore[arg-type]

    def single_line(self, items: list[object]) -> SingleLine:
        return SingleLine(header=items[0])  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _line_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
    )


def _expected(names: set[str]) -> str:
    readable = sorted({_TERMINAL_NAMES.get(n, n) for n in names})
    return ", ".join(readable)


def _describe(exc: UnexpectedInput, text: str) -> tuple[str, int]:
    """Build a message naming the offending text, plus a 1-based column."""
    if isinstance(exc, UnexpectedCharacters):
        column = exc.column
        return f"unrecognized text {text[column - 1:]!r} in {text!r}", column
    if isinstance(exc, UnexpectedToken):
        expected = _expected(exc.expected)
        if exc.token.type == "$END":
            return (
                f"line ended early in {text!r}, expected {expected}"
                " (is a reference left unclosed?)",
                len(text) + 1,
            )
        column = exc.column if isinstance(exc.column, int) and exc.column > 0 else 1
        return (
            f"unexpected {str(exc.token)!r} at {text[column - 1:]!r} in {text!r},"
            f" expected {expected}",
            column,
        )
    return f"cannot parse {text!r}", 1


def parse_line(text: str, lineno: int | None = None, column_offset: int = 0) -> Line:
    """Classify and tokenize one line of template text (without indentation).

    Raises :class:`ParseError` naming the offending text on failure.
    """
    try:
        tree = _line_parser().parse(text)
    except UnexpectedInput as e:
        message, column = _describe(e, text)
        raise ParseError(message, line=lineno, column=column + column_offset) from e
    return LineTransformer().transform(tree)


def _lexical_error(message: str, lineno: int) -> Diagnostic:
    return Diagnostic(rule="parse_line", severity=Severity.ERROR, message=message, line=lineno)

def scan_lines(
    source: str, options: CompilerOptions = DEFAULT_OPTIONS
) -> tuple[list[IndentedLine], list[Diagnostic]]:
    """Split *source* into indented, classified lines.

    Empty lines are dropped. A line holding only spaces and tabs is a
    lexical error unless ``options.allow_whitespace_lines`` is set. Every
    line that fails to parse contributes one ERROR diagnostic; the remaining
    lines are still returned so that all lexical problems are reported
    together.
    """
    lines: list[IndentedLine] = []
    diagnostics: list[Diagnostic] = []
    for lineno, physical in enumerate(source.split("\n"), start=1):
        text = physical[:-1] if physical.endswith("\r") else physical
        if not text:
            continue
        body = text.lstrip(" \t")
        if not body and options.allow_whitespace_lines:
            continue
        indent_text = text[: len(text) - len(body)]
        indent = sum(options.tab_width if ch == "\t" else 1 for ch in indent_text)
        if not body:
            diagnostics.append(
                _lexical_error(f"line holds only whitespace {text!r}; leave it empty", lineno)
            )
            continue
        try:
            line = parse_line(body, lineno=lineno, column_offset=len(indent_text))
        except ParseError as exc:
            diagnostics.append(_lexical_error(str(exc), lineno))
            continue
        lines.append(
            IndentedLine(indent=indent, line=line, lineno=lineno, indent_text=indent_text)
        )
    logger.debug("Scanned %d line(s), %d lexical error(s)", len(lines), len(diagnostics))
    return lines, diagnostics
