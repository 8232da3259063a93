"""Constant folding over content sequences."""

from __future__ import annotations

from collections.abc import Iterable

from nestyle.model.content import Content, Contents, Raw


def compress_contents(contents: Iterable[Content]) -> Contents:
    """Merge every run of adjacent ``Raw`` segments into one.

    Folding an already folded sequence returns it unchanged.
    """
    folded: list[Content] = []
    for content in contents:
        if isinstance(content, Raw) and folded and isinstance(folded[-1], Raw):
            folded[-1] = Raw(folded[-1].text + content.text)
        else:
            folded.append(content)
    return tuple(folded)
