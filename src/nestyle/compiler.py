"""Compiler entry points: template source in, bindable template out.

Compilation is split in two phases. ``compile_template`` and
``compile_mixin`` parse, nest, resolve, flatten and fold the source without
looking at any data. ``bind`` then resolves every reference against a
context and returns a :class:`~nestyle.codegen.Renderer` (or a
:class:`~nestyle.codegen.Mixin`), which can be rendered any number of times.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from nestyle.codegen.deref import LeafKind, build_environment, classify_leaf, iter_leaves
from nestyle.codegen.generator import generate
from nestyle.codegen.renderer import Mixin, Renderer, UrlRender
from nestyle.config import DEFAULT_OPTIONS, CompilerOptions
from nestyle.errors import CompileError
from nestyle.model.content import Contents, Raw
from nestyle.model.declaration import ContentPair, Declaration, FlatDec
from nestyle.model.diagnostic import Diagnostic
from nestyle.parser.transformer import scan_lines
from nestyle.structure.nester import nest_lines
from nestyle.structure.resolver import resolve_mixin_lines, resolve_nests
from nestyle.transforms.flatten import flatten_all, join_pairs, render_rules
from nestyle.transforms.folding import compress_contents
from nestyle.validation.validator import lint

logger = logging.getLogger(__name__)


def _free_names(contents: Contents) -> tuple[str, ...]:
    names: dict[str, None] = {}
    for content in contents:
        if isinstance(content, Raw):
            continue
        for leaf in iter_leaves(content.deref):
            if classify_leaf(leaf.name) is not LeafKind.NUMBER:
                names.setdefault(leaf.name)
    return tuple(names)


@dataclass(frozen=True)
class Template:
    """A compiled standalone template.

    Attributes:
        rules: The flattened rules, in output order.
        contents: The folded output contents the rules render to.
        warnings: Non-fatal lint findings.
        options: The options the template was compiled with.
    """

    rules: tuple[FlatDec, ...]
    contents: Contents
    warnings: tuple[Diagnostic, ...] = ()
    options: CompilerOptions = DEFAULT_OPTIONS

    @property
    def names(self) -> tuple[str, ...]:
        """Names the template references, in first-use order."""
        return _free_names(self.contents)

    def bind(
        self, context: Mapping[str, Any] | None = None, /, **names: Any
    ) -> Renderer:
        """Resolve every reference and return a Renderer.

        Keyword bindings take precedence over *context*, which takes
        precedence over the built-in names. *context* is positional-only, so
        any template name, ``context`` included, can be bound by keyword.
        Raises :class:`BindError`.
        """
        return generate(
            self.contents, build_environment(context, names), self.options.encoding
        )

    def render(
        self,
        url_render: UrlRender,
        context: Mapping[str, Any] | None = None,
        /,
        **names: Any,
    ) -> bytes:
        return self.bind(context, **names)(url_render)


@dataclass(frozen=True)
class MixinTemplate:
    """A compiled mixin fragment: attribute pairs joined with ``;``."""

    pairs: tuple[ContentPair, ...]
    contents: Contents
    options: CompilerOptions = DEFAULT_OPTIONS

    @property
    def names(self) -> tuple[str, ...]:
        return _free_names(self.contents)

    def bind(self, context: Mapping[str, Any] | None = None, /, **names: Any) -> Mixin:
        return Mixin(
            generate(self.contents, build_environment(context, names), self.options.encoding)
        )


def check_template(
    source: str, options: CompilerOptions | None = None
) -> tuple[Template | None, list[Diagnostic]]:
    """Compile *source*, returning the template (or None) and every diagnostic."""
    options = options or DEFAULT_OPTIONS
    lines, diagnostics = scan_lines(source, options)
    lexical_ok = not diagnostics
    diagnostics.extend(lint(lines, strict=options.strict_indentation))

    declarations: list[Declaration] = []
    # Dropped lines would cause misleading structural errors.
    if lexical_ok:
        nests = nest_lines(lines)
        declarations, structural = resolve_nests(nests, root=True)
        diagnostics.extend(structural)
    if any(d.is_error for d in diagnostics):
        return None, diagnostics

    rules = flatten_all(declarations)
    contents = compress_contents(render_rules(rules))
    logger.debug(
        "Compiled %d line(s) into %d rule(s), %d segment(s)",
        len(lines),
        len(rules),
        len(contents),
    )
    template = Template(
        rules=tuple(rules),
        contents=contents,
        warnings=tuple(d for d in diagnostics if not d.is_error),
        options=options,
    )
    return template, diagnostics


def compile_template(source: str, options: CompilerOptions | None = None) -> Template:
    """Compile a standalone template.

    Raises :class:`CompileError` carrying every lexical and structural
    error; no partial template is ever returned.
    """
    template, diagnostics = check_template(source, options)
    if template is None:
        raise CompileError(diagnostics)
    for warning in template.warnings:
        logger.warning("%s", warning)
    return template


def check_mixin(
    source: str, options: CompilerOptions | None = None
) -> tuple[MixinTemplate | None, list[Diagnostic]]:
    """Compile a mixin fragment, returning the result (or None) and diagnostics."""
    options = options or DEFAULT_OPTIONS
    lines, diagnostics = scan_lines(source, options)
    if diagnostics:
        return None, diagnostics
    pairs, errors = resolve_mixin_lines(lines)
    if errors:
        return None, errors
    contents = compress_contents(join_pairs(pairs))
    logger.debug("Compiled mixin with %d pair(s)", len(pairs))
    return MixinTemplate(pairs=tuple(pairs), contents=contents, options=options), []


def compile_mixin(source: str, options: CompilerOptions | None = None) -> MixinTemplate:
    """Compile a mixin fragment: a flat list of pairs and mixin references.

    Raises :class:`CompileError` when a line is a header or fails to parse.
    """
    mixin, diagnostics = check_mixin(source, options)
    if mixin is None:
        raise CompileError(diagnostics)
    return mixin
