"""Declaration resolver: turns the indentation tree into validated declarations.

Each structural problem becomes one ERROR diagnostic. Resolution never stops
at the first problem: every node in the tree is visited so that all errors
are reported together, and a declaration is only returned when the whole
subtree is valid.
"""

from __future__ import annotations

from collections.abc import Sequence

from nestyle.model.content import show_contents, show_deref
from nestyle.model.declaration import (
    Attrib,
    Block,
    ContentPair,
    Declaration,
    MixinDec,
    MixinPair,
    SimplePair,
)
from nestyle.model.diagnostic import Diagnostic, Severity
from nestyle.model.lines import IndentedLine, Line, MixinLine, Nest, PairLine

Resolution = tuple["Declaration | None", list[Diagnostic]]


def describe_line(line: Line) -> str:
    """Return *line* spelled roughly as it appeared in the template."""
    if isinstance(line, MixinLine):
        return f"^{show_deref(line.deref)}^"
    if isinstance(line, PairLine):
        return f"{show_contents(line.key)}: {show_contents(line.value)}"
    return show_contents(line.header)


def _error(rule: str, message: str, nest: Nest, fix: str | None = None) -> Diagnostic:
    return Diagnostic(
        rule=rule,
        severity=Severity.ERROR,
        message=f"{message}: {describe_line(nest.line)!r}",
        line=nest.lineno or None,
        fix=fix,
    )


def resolve_nest(nest: Nest, root: bool) -> Resolution:
    """Convert one indentation node into a declaration.

    Returns ``(declaration, [])`` on success and ``(None, errors)`` otherwise.
    """
    line = nest.line

    if isinstance(line, MixinLine):
        if nest.children:
            return None, [_error("mixin_nesting", "Mixins may not have nested content", nest)]
        if root:
            return None, [
                _error(
                    "mixin_at_root",
                    "Mixins cannot appear at the top level",
                    nest,
                    fix="Indent the mixin reference under a header line.",
                )
            ]
        return MixinDec(line.deref), []

    if isinstance(line, PairLine):
        if nest.children:
            return None, [
                _error("pair_nesting", "Only header lines may have nested content", nest)
            ]
        if root:
            return None, [
                _error(
                    "pair_at_root",
                    "Attribute pairs cannot appear at the top level",
                    nest,
                    fix="Indent the attribute under a header line.",
                )
            ]
        return Attrib(line.key, line.value), []

    if not nest.children:
        return None, [
            _error(
                "empty_header",
                "Header lines must have nested content",
                nest,
                fix="Add indented attributes below the header, or remove it.",
            )
        ]
    children, errors = resolve_nests(nest.children, root=False)
    if errors:
        return None, errors
    return Block(line.header, tuple(children)), []


def resolve_nests(
    nests: Sequence[Nest], root: bool = True
) -> tuple[list[Declaration], list[Diagnostic]]:
    """Resolve a list of sibling nodes, collecting the errors of all of them."""
    declarations: list[Declaration] = []
    errors: list[Diagnostic] = []
    for nest in nests:
        declaration, nest_errors = resolve_nest(nest, root)
        if nest_errors:
            errors.extend(nest_errors)
        elif declaration is not None:
            declarations.append(declaration)
    if errors:
        return [], errors
    return declarations, []


def resolve_mixin_lines(
    lines: Sequence[IndentedLine],
) -> tuple[list[ContentPair], list[Diagnostic]]:
    """Resolve the lines of a mixin fragment into attribute pairs.

    Indentation is ignored: a fragment is a flat list of pairs and mixin
    references. Header lines are rejected.
    """
    pairs: list[ContentPair] = []
    errors: list[Diagnostic] = []
    for indented in lines:
        line = indented.line
        if isinstance(line, PairLine):
            pairs.append(SimplePair(line.key, line.value))
        elif isinstance(line, MixinLine):
            pairs.append(MixinPair(line.deref))
        else:
            errors.append(
                Diagnostic(
                    rule="mixin_header",
                    severity=Severity.ERROR,
                    message=f"Mixins cannot contain header lines: {describe_line(line)!r}",
                    line=indented.lineno or None,
                )
            )
    if errors:
        return [], errors
    return pairs, []
