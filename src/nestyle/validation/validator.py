"""Indentation linter: runs all lint rules over scanned lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Callable

from nestyle.model.diagnostic import Diagnostic, Severity
from nestyle.model.lines import IndentedLine
from nestyle.validation.rules import ALL_RULES

RuleFunc = Callable[[Sequence[IndentedLine]], list[Diagnostic]]


def lint(
    lines: Sequence[IndentedLine],
    strict: bool = False,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all lint rules against *lines*.

    With *strict* set, every WARNING is reported as an ERROR instead.
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(lines))
    if strict:
        diagnostics = [
            replace(d, severity=Severity.ERROR) if d.is_warning else d for d in diagnostics
        ]
    return diagnostics
