"""CLI command: nestyle render -- compile, bind and render a template."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import click

from nestyle.codegen.renderer import Mixin
from nestyle.compiler import compile_mixin, compile_template
from nestyle.errors import BindError, CompileError


def _split_assignment(raw: str, option: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint=option)
    return name, value


def _url_renderer(base_url: str) -> Callable[[Any], str]:
    def url_render(url: Any) -> str:
        if not base_url:
            return str(url)
        return base_url.rstrip("/") + "/" + str(url).lstrip("/")

    return url_render


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--var", "variables", multiple=True, help="Bind NAME=VALUE (repeatable)")
@click.option(
    "--mixin", "mixins", multiple=True, help="Bind NAME=FILE to a mixin fragment (repeatable)"
)
@click.option("--base-url", default="", help="Prefix for rendered @url@ references")
def render(
    template: str, variables: tuple[str, ...], mixins: tuple[str, ...], base_url: str
) -> None:
    """Render a template to stdout.

    Variables are bound as plain strings. Mixin fragments are compiled and
    bound in the order given, each seeing the variables and the fragments
    bound before it; the template sees all of them.
    """
    context: dict[str, Any] = dict(_split_assignment(v, "--var") for v in variables)

    try:
        bound_mixins: dict[str, Mixin] = {}
        for assignment in mixins:
            name, mixin_path = _split_assignment(assignment, "--mixin")
            source = Path(mixin_path).read_text(encoding="utf-8")
            bound_mixins[name] = compile_mixin(source).bind(context, **bound_mixins)
        compiled = compile_template(Path(template).read_text(encoding="utf-8"))
        renderer = compiled.bind(context, **bound_mixins)
    except CompileError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)
    except BindError as exc:
        for problem in exc.problems:
            click.echo(f"Bind error: {problem}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"Cannot read mixin: {exc}", err=True)
        sys.exit(1)

    click.echo(renderer(_url_renderer(base_url)))
