"""Flattening: rewrites nested blocks into independent descendant-selector rules."""

from __future__ import annotations

from collections.abc import Iterable

from nestyle.errors import InternalError
from nestyle.model.content import Content, Contents, Mix, Raw
from nestyle.model.declaration import (
    Attrib,
    Block,
    ContentPair,
    Declaration,
    FlatDec,
    MixinDec,
    MixinPair,
    SimplePair,
)

_DESCENDANT = Raw(" ")


def flatten(declaration: Declaration) -> list[FlatDec]:
    """Flatten a block into rules, parents first and children in source order.

    The block's own attributes and mixins become the first rule (omitted when
    there are none). Each nested block follows, flattened with its header
    prefixed by the parent header and a single space.
    """
    if not isinstance(declaration, Block):
        raise InternalError(f"Only blocks can be flattened, got {type(declaration).__name__}")

    pairs: list[ContentPair] = []
    nested: list[Block] = []
    for child in declaration.children:
        if isinstance(child, Attrib):
            pairs.append(SimplePair(child.key, child.value))
        elif isinstance(child, MixinDec):
            pairs.append(MixinPair(child.deref))
        else:
            nested.append(child)

    rules: list[FlatDec] = []
    if pairs:
        rules.append(FlatDec(declaration.header, tuple(pairs)))
    for inner in nested:
        selector = declaration.header + (_DESCENDANT,) + inner.header
        rules.extend(flatten(Block(selector, inner.children)))
    return rules


def flatten_all(declarations: Iterable[Declaration]) -> list[FlatDec]:
    rules: list[FlatDec] = []
    for declaration in declarations:
        rules.extend(flatten(declaration))
    return rules


def pair_contents(pair: ContentPair) -> Contents:
    """``key:value`` for a simple pair, a mixin splice otherwise."""
    if isinstance(pair, SimplePair):
        return pair.key + (Raw(":"),) + pair.value
    return (Mix(pair.deref),)


def join_pairs(pairs: Iterable[ContentPair]) -> Contents:
    """Render attribute pairs separated by ``;``."""
    contents: list[Content] = []
    for i, pair in enumerate(pairs):
        if i:
            contents.append(Raw(";"))
        contents.extend(pair_contents(pair))
    return tuple(contents)


def render_rule(rule: FlatDec) -> Contents:
    """Render one rule as ``selector{key:value;...}``."""
    return rule.selector + (Raw("{"),) + join_pairs(rule.pairs) + (Raw("}"),)


def render_rules(rules: Iterable[FlatDec]) -> Contents:
    contents: list[Content] = []
    for rule in rules:
        contents.extend(render_rule(rule))
    return tuple(contents)
