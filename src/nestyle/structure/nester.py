"""Indentation nester: builds a tree from indentation-annotated lines."""

from __future__ import annotations

from collections.abc import Sequence

from nestyle.model.lines import IndentedLine, Nest


def nest_lines(lines: Sequence[IndentedLine]) -> list[Nest]:
    """Group *lines* into a forest by indentation.

    Each line owns every immediately following line that is indented strictly
    deeper than itself; the next line at the same or a shallower width starts
    a new sibling. Widths are only compared against the owning line, so
    siblings indented by different amounts are accepted as they are.
    """
    nests: list[Nest] = []
    i = 0
    while i < len(lines):
        head = lines[i]
        end = i + 1
        while end < len(lines) and lines[end].indent > head.indent:
            end += 1
        nests.append(
            Nest(
                line=head.line,
                children=tuple(nest_lines(lines[i + 1:end])),
                lineno=head.lineno,
                indent=head.indent,
            )
        )
        i = end
    return nests
