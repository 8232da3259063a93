"""Content model: interpolated text segments and deref expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Leaf:
    """A single identifier in a deref expression."""

    name: str


@dataclass(frozen=True)
class Apply:
    """Application of ``function`` to ``argument``.

    ``a.b.c`` and ``a b c`` both build ``Apply(Apply(a, b), c)``.
    """

    function: Deref
    argument: Deref


Deref = Union[Leaf, Apply]


@dataclass(frozen=True)
class Raw:
    """Literal text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Var:
    """``$deref$`` -- a context value rendered as style text."""

    deref: Deref


@dataclass(frozen=True)
class Url:
    """``@deref@`` -- a URL passed through the caller's URL renderer."""

    deref: Deref


@dataclass(frozen=True)
class UrlParam:
    """``@?deref@`` -- a ``(url, params)`` pair rendered with a query string."""

    deref: Deref


@dataclass(frozen=True)
class Mix:
    """A mixin spliced into the output."""

    deref: Deref


Content = Union[Raw, Var, Url, UrlParam, Mix]
Contents = tuple[Content, ...]


def show_deref(deref: Deref) -> str:
    """Return the source-like spelling of *deref*, parenthesising arguments."""
    if isinstance(deref, Leaf):
        return deref.name
    argument = show_deref(deref.argument)
    if isinstance(deref.argument, Apply):
        argument = f"({argument})"
    return f"{show_deref(deref.function)} {argument}"


def show_contents(contents: Contents) -> str:
    """Return *contents* spelled the way it would appear in a template."""
    parts: list[str] = []
    for content in contents:
        if isinstance(content, Raw):
            parts.append(content.text.replace("$", "$$").replace("@", "@@"))
        elif isinstance(content, Var):
            parts.append(f"${show_deref(content.deref)}$")
        elif isinstance(content, Url):
            parts.append(f"@{show_deref(content.deref)}@")
        elif isinstance(content, UrlParam):
            parts.append(f"@?{show_deref(content.deref)}@")
        else:
            parts.append(f"^{show_deref(content.deref)}^")
    return "".join(parts)
