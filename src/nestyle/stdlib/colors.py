"""Style values: the ``ToStyle`` protocol, RGB colours and named colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ToStyle(Protocol):
    """A value that knows how to spell itself in a stylesheet."""

    def to_style(self) -> str: ...


def is_style_representable(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float, ToStyle))


def to_style(value: Any) -> str:
    """Return the stylesheet text for *value*.

    Strings are used verbatim, numbers are formatted with ``str`` and any
    other value must implement :class:`ToStyle`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, ToStyle):
        return value.to_style()
    if is_style_representable(value):
        return str(value)
    raise TypeError(f"{type(value).__name__} value {value!r} has no style representation")


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour.

    When every channel's two hex digits match, the short ``#RGB`` form is
    used (``Color(0x11, 0x22, 0x33)`` is ``#123``); otherwise ``#RRGGBB``.
    Use :class:`NamedColor` for a fixed six-digit spelling such as ``red``.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channels must be within 0..255, got {channel}")

    @property
    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_style(self) -> str:
        digits = self.hex[1:]
        if digits[0::2] == digits[1::2]:
            return "#" + digits[0::2]
        return self.hex


@dataclass(frozen=True)
class NamedColor:
    """A colour with a fixed, always six-digit spelling."""

    name: str
    color: Color

    def to_style(self) -> str:
        return self.color.hex


RED = NamedColor("red", Color(255, 0, 0))
BLACK = NamedColor("black", Color(0, 0, 0))
