"""Line model: classified source lines and the indentation tree built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from nestyle.model.content import Contents, Deref


@dataclass(frozen=True)
class PairLine:
    """``key: value`` line."""

    key: Contents
    value: Contents


@dataclass(frozen=True)
class SingleLine:
    """A bare header line such as a selector."""

    header: Contents


@dataclass(frozen=True)
class MixinLine:
    """``^deref^`` line."""

    deref: Deref


Line = Union[PairLine, SingleLine, MixinLine]


@dataclass(frozen=True)
class IndentedLine:
    """A classified line together with where and how it was indented.

    Attributes:
        indent: Indentation width (spaces count 1, tabs count ``tab_width``).
        line: The classified line content.
        lineno: 1-based source line number.
        indent_text: The raw leading whitespace, kept for indentation lint.
    """

    indent: int
    line: Line
    lineno: int = 0
    indent_text: str = ""


@dataclass(frozen=True)
class Nest:
    """A line and the lines nested beneath it."""

    line: Line
    children: tuple[Nest, ...] = field(default_factory=tuple)
    lineno: int = 0
    indent: int = 0
