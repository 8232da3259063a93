"""Code generation: binds folded contents to an environment and builds a Renderer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nestyle.codegen.deref import evaluate
from nestyle.codegen.renderer import Emitter, Mixin, Renderer, UrlRender
from nestyle.codegen.urls import QueryParams, normalize_params, query_string
from nestyle.errors import BindError
from nestyle.model.content import Content, Contents, Raw, Url, UrlParam, Var, show_deref
from nestyle.stdlib import is_style_representable, to_style
from nestyle.transforms.folding import compress_contents

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------


def _literal(data: bytes) -> Emitter:
    def emit(url_render: UrlRender) -> bytes:
        return data

    return emit


def _style(value: Any, encoding: str) -> Emitter:
    def emit(url_render: UrlRender) -> bytes:
        return to_style(value).encode(encoding)

    return emit


def _url(url: Any, encoding: str) -> Emitter:
    def emit(url_render: UrlRender) -> bytes:
        return url_render(url).encode(encoding)

    return emit


def _url_params(url: Any, params: QueryParams, encoding: str) -> Emitter:
    query = query_string(params)

    def emit(url_render: UrlRender) -> bytes:
        return (url_render(url) + query).encode(encoding)

    return emit


def _splice(mixin: Mixin) -> Emitter:
    def emit(url_render: UrlRender) -> bytes:
        return mixin(url_render)

    return emit


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------


def _split_url_params(value: Any, where: str) -> tuple[Any, QueryParams]:
    try:
        if isinstance(value, (str, bytes)):
            raise TypeError("strings are not (url, params) pairs")
        url, params = value
        return url, normalize_params(params)
    except (TypeError, ValueError):
        raise BindError(
            [f"{where} must be a (url, [(key, value), ...]) pair, got {value!r}"]
        ) from None


def bind_content(content: Content, environment: Mapping[str, Any], encoding: str) -> Emitter:
    """Resolve the references in one content segment and return its emitter."""
    if isinstance(content, Raw):
        return _literal(content.text.encode(encoding))

    value = evaluate(content.deref, environment)
    where = repr(show_deref(content.deref))

    if isinstance(content, Var):
        if not is_style_representable(value):
            raise BindError([f"{where} has no style representation: {value!r}"])
        return _style(value, encoding)
    if isinstance(content, Url):
        return _url(value, encoding)
    if isinstance(content, UrlParam):
        url, params = _split_url_params(value, where)
        return _url_params(url, params, encoding)
    if not isinstance(value, Mixin):
        raise BindError([f"{where} is not a mixin: {value!r}"])
    return _splice(value)


def generate(
    contents: Contents, environment: Mapping[str, Any], encoding: str = "utf-8"
) -> Renderer:
    """Fold *contents* and bind every segment, producing a Renderer.

    All binding problems are collected and raised together as one
    :class:`BindError`.
    """
    emitters: list[Emitter] = []
    problems: list[str] = []
    for content in compress_contents(contents):
        try:
            emitters.append(bind_content(content, environment, encoding))
        except BindError as exc:
            problems.extend(p for p in exc.problems if p not in problems)
    if problems:
        raise BindError(problems)
    logger.debug("Generated renderer with %d emitter(s)", len(emitters))
    return Renderer(tuple(emitters))
