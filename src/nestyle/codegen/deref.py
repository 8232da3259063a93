"""Deref classification and evaluation against a binding environment."""

from __future__ import annotations

import inspect
from collections import ChainMap
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from nestyle.errors import BindError, InternalError
from nestyle.model.content import Apply, Deref, Leaf, show_deref
from nestyle.stdlib import BUILTINS

_DIGITS = frozenset("0123456789")


class LeafKind(Enum):
    """How a deref identifier is resolved."""

    NUMBER = "number"
    CONSTRUCTOR = "constructor"
    VARIABLE = "variable"


def classify_leaf(name: str) -> LeafKind:
    """Classify an identifier: all digits, capitalised, or anything else."""
    if not name:
        raise InternalError("Illegal empty identifier in deref")
    if set(name) <= _DIGITS:
        return LeafKind.NUMBER
    if name[0].isupper():
        return LeafKind.CONSTRUCTOR
    return LeafKind.VARIABLE


def iter_leaves(deref: Deref) -> Iterator[Leaf]:
    """Yield the leaves of *deref* from left to right."""
    if isinstance(deref, Leaf):
        yield deref
    else:
        yield from iter_leaves(deref.function)
        yield from iter_leaves(deref.argument)


def build_environment(
    context: Mapping[str, Any] | None = None, names: Mapping[str, Any] | None = None
) -> Mapping[str, Any]:
    """Layer keyword bindings over *context* over the built-in names."""
    return ChainMap(dict(names or {}), dict(context or {}), BUILTINS)


def _spine(deref: Deref) -> tuple[Leaf, list[Deref]]:
    arguments: list[Deref] = []
    while isinstance(deref, Apply):
        arguments.append(deref.argument)
        deref = deref.function
    arguments.reverse()
    return deref, arguments


def _lookup(leaf: Leaf, environment: Mapping[str, Any]) -> Any:
    kind = classify_leaf(leaf.name)
    if kind is LeafKind.NUMBER:
        return int(leaf.name)
    try:
        return environment[leaf.name]
    except KeyError:
        raise BindError([f"Unbound {kind.value} {leaf.name!r}"]) from None


def _call(function: Any, values: list[Any]) -> Any:
    try:
        inspect.signature(function).bind(*values)
    except ValueError:
        # No introspectable signature, e.g. some builtins.
        return function(*values)
    except TypeError:
        result = function
        for value in values:
            result = result(value)
        return result
    return function(*values)


def evaluate(deref: Deref, environment: Mapping[str, Any]) -> Any:
    """Evaluate *deref* in *environment*.

    An application chain ``f a b`` calls ``f(a, b)`` when *f* accepts two
    arguments, and ``f(a)(b)`` when it only takes one at a time (a curried
    host function). Arguments are evaluated before the call. Raises
    :class:`BindError` when a name is unbound or a call fails.
    """
    head, arguments = _spine(deref)
    if not arguments:
        return _lookup(head, environment)

    function: Any = None
    values: list[Any] = []
    problems: list[str] = []
    try:
        function = _lookup(head, environment)
    except BindError as exc:
        problems.extend(exc.problems)
    for argument in arguments:
        try:
            values.append(evaluate(argument, environment))
        except BindError as exc:
            problems.extend(exc.problems)
    if problems:
        raise BindError(problems)

    if not callable(function):
        raise BindError([f"{show_deref(head)!r} is not callable in {show_deref(deref)!r}"])
    try:
        return _call(function, values)
    except Exception as e:
        raise BindError([f"Evaluating {show_deref(deref)!r} failed: {e}"]) from e
