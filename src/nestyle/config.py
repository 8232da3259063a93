from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerOptions:
    tab_width: int = 4
    strict_indentation: bool = False  # indentation lint findings become errors
    allow_whitespace_lines: bool = False  # skip lines of only spaces and tabs
    encoding: str = "utf-8"


DEFAULT_OPTIONS = CompilerOptions()
