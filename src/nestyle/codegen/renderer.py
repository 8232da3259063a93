"""Renderer: the compiled, reusable form of a template."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

UrlRender = Callable[[Any], str]
Emitter = Callable[[UrlRender], bytes]


@dataclass(frozen=True)
class Renderer:
    """A function from a URL-render function to output bytes.

    Renderers form a monoid: :meth:`empty` renders nothing and ``+``
    concatenates output. A renderer holds no mutable state, so one instance
    can be called any number of times, from any thread.
    """

    emitters: tuple[Emitter, ...] = ()

    def __call__(self, url_render: UrlRender) -> bytes:
        return b"".join(emit(url_render) for emit in self.emitters)

    def __add__(self, other: object) -> Renderer:
        if not isinstance(other, Renderer):
            return NotImplemented
        return Renderer(self.emitters + other.emitters)

    @classmethod
    def empty(cls) -> Renderer:
        return cls()

    @classmethod
    def concat(cls, renderers: Iterable[Renderer]) -> Renderer:
        emitters: list[Emitter] = []
        for renderer in renderers:
            emitters.extend(renderer.emitters)
        return cls(tuple(emitters))


@dataclass(frozen=True)
class Mixin:
    """A bound mixin fragment, referenced from templates as ``^name^``."""

    renderer: Renderer

    def __call__(self, url_render: UrlRender) -> bytes:
        return self.renderer(url_render)


def render(url_render: UrlRender, renderer: Renderer) -> bytes:
    """Run *renderer* with *url_render*."""
    return renderer(url_render)
