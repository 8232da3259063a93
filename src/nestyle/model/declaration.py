"""Declaration model: validated declaration tree and flattened rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from nestyle.model.content import Contents, Deref


@dataclass(frozen=True)
class Attrib:
    """An attribute pair inside a block."""

    key: Contents
    value: Contents


@dataclass(frozen=True)
class Block:
    """A header owning nested declarations."""

    header: Contents
    children: tuple[Declaration, ...]


@dataclass(frozen=True)
class MixinDec:
    """A mixin reference inside a block."""

    deref: Deref


Declaration = Union[Attrib, Block, MixinDec]


@dataclass(frozen=True)
class SimplePair:
    """A flattened ``key:value`` attribute."""

    key: Contents
    value: Contents


@dataclass(frozen=True)
class MixinPair:
    """A flattened mixin splice."""

    deref: Deref


ContentPair = Union[SimplePair, MixinPair]


@dataclass(frozen=True)
class FlatDec:
    """One fully flattened rule: a complete selector and its attributes."""

    selector: Contents
    pairs: tuple[ContentPair, ...]
