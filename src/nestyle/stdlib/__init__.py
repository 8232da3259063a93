"""Names every template can reference without binding them."""

from __future__ import annotations

from typing import Any

from nestyle.stdlib.colors import (
    BLACK,
    RED,
    Color,
    NamedColor,
    ToStyle,
    is_style_representable,
    to_style,
)

BUILTINS: dict[str, Any] = {
    "Color": Color,
    "red": RED,
    "black": BLACK,
}

__all__ = [
    "BUILTINS",
    "BLACK",
    "RED",
    "Color",
    "NamedColor",
    "ToStyle",
    "is_style_representable",
    "to_style",
]
