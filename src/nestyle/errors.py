"""Error hierarchy for the nestyle template compiler."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestyle.model.diagnostic import Diagnostic


class TemplateError(Exception):
    """Base error for all nestyle errors."""


class ParseError(TemplateError):
    """Raised when a single template line cannot be tokenized or classified."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class CompileError(TemplateError):
    """Raised when compilation produces ERROR-severity diagnostics.

    Every error found in the template is reported, not only the first.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Compilation failed with {len(messages)} error(s): " + "; ".join(messages)
        )

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.is_error]


class BindError(TemplateError):
    """Raised when a compiled template cannot be bound to a context."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(
            f"Binding failed with {len(problems)} problem(s): " + "; ".join(problems)
        )


class InternalError(TemplateError):
    """A broken invariant inside the compiler, never caused by template text."""
