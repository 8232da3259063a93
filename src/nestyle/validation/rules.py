"""Indentation lint rules.

The nester accepts any indentation and only compares a line with the line
that owns it. These rules point out layouts that are accepted but probably
not what the author meant. Each rule takes the scanned lines and returns a
list of WARNING diagnostics.
"""

from __future__ import annotations

from collections.abc import Sequence

from nestyle.model.diagnostic import Diagnostic, Severity
from nestyle.model.lines import IndentedLine, Nest
from nestyle.structure.nester import nest_lines


def check_mixed_indentation(lines: Sequence[IndentedLine]) -> list[Diagnostic]:
    """A single line should not be indented with both tabs and spaces."""
    diagnostics: list[Diagnostic] = []
    for line in lines:
        if " " in line.indent_text and "\t" in line.indent_text:
            diagnostics.append(
                Diagnostic(
                    rule="check_mixed_indentation",
                    severity=Severity.WARNING,
                    message="Line is indented with both tabs and spaces.",
                    line=line.lineno or None,
                    fix="Indent with spaces only, or with tabs only.",
                )
            )
    return diagnostics


def _check_siblings(nests: Sequence[Nest], diagnostics: list[Diagnostic]) -> None:
    if nests:
        expected = nests[0].indent
        for nest in nests[1:]:
            if nest.indent != expected:
                diagnostics.append(
                    Diagnostic(
                        rule="check_sibling_indentation",
                        severity=Severity.WARNING,
                        message=(
                            f"Line is indented by {nest.indent} but its first sibling"
                            f" is indented by {expected}."
                        ),
                        line=nest.lineno or None,
                        fix="Indent sibling lines by the same amount.",
                    )
                )
    for nest in nests:
        _check_siblings(nest.children, diagnostics)


def check_sibling_indentation(lines: Sequence[IndentedLine]) -> list[Diagnostic]:
    """Lines sharing a parent should share an indentation width."""
    diagnostics: list[Diagnostic] = []
    _check_siblings(nest_lines(lines), diagnostics)
    return diagnostics


ALL_RULES = [
    check_mixed_indentation,
    check_sibling_indentation,
]
