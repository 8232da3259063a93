"""CLI command: nestyle flatten -- show the flattened rules of a template."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestyle.compiler import compile_template
from nestyle.errors import CompileError
from nestyle.model.content import show_contents, show_deref
from nestyle.model.declaration import SimplePair


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
def flatten(template: str) -> None:
    """Compile a template and display its flattened rules.

    References are shown unresolved, the way they appear in the source.
    """
    path = Path(template)
    try:
        compiled = compile_template(path.read_text(encoding="utf-8"))
    except CompileError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(compiled.rules)}")
    for rule in compiled.rules:
        click.echo(show_contents(rule.selector))
        for pair in rule.pairs:
            if isinstance(pair, SimplePair):
                click.echo(f"    {show_contents(pair.key)}: {show_contents(pair.value)}")
            else:
                click.echo(f"    ^{show_deref(pair.deref)}^")
    if compiled.names:
        click.echo(f"Names: {', '.join(compiled.names)}")
