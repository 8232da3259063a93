"""Binding and code generation: from folded contents to a Renderer."""

from nestyle.codegen.deref import (
    LeafKind,
    build_environment,
    classify_leaf,
    evaluate,
    iter_leaves,
)
from nestyle.codegen.generator import bind_content, generate
from nestyle.codegen.renderer import Mixin, Renderer, UrlRender, render
from nestyle.codegen.urls import encode_url_component, query_string

__all__ = [
    "LeafKind",
    "classify_leaf",
    "evaluate",
    "iter_leaves",
    "build_environment",
    "bind_content",
    "generate",
    "Renderer",
    "Mixin",
    "UrlRender",
    "render",
    "encode_url_component",
    "query_string",
]
