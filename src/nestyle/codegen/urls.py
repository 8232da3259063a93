"""Query-string encoding for ``@?url@`` references."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote_plus

QueryParams = tuple[tuple[str, str], ...]


def encode_url_component(text: str) -> str:
    """Percent-encode *text* keeping only RFC 3986 unreserved characters.

    Letters, digits and ``-_.~`` pass through, a space becomes ``+`` and
    every other UTF-8 byte becomes ``%XX`` with uppercase hex digits.
    """
    return quote_plus(text, safe="")


def query_string(params: Iterable[tuple[str, str]]) -> str:
    """``?k=v&k2=v2``, or an empty string when there are no parameters."""
    encoded = [f"{encode_url_component(k)}={encode_url_component(v)}" for k, v in params]
    if not encoded:
        return ""
    return "?" + "&".join(encoded)


def normalize_params(params: Iterable[tuple[object, object]]) -> QueryParams:
    """Copy *params* into an immutable tuple of string pairs."""
    return tuple((str(k), str(v)) for k, v in params)
