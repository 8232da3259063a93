"""Tree construction: indentation nesting and declaration resolution."""

from nestyle.structure.nester import nest_lines
from nestyle.structure.resolver import (
    describe_line,
    resolve_mixin_lines,
    resolve_nest,
    resolve_nests,
)

__all__ = [
    "nest_lines",
    "describe_line",
    "resolve_nest",
    "resolve_nests",
    "resolve_mixin_lines",
]
