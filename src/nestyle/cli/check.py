"""CLI command: nestyle check -- compile a template and report diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestyle.compiler import check_mixin, check_template
from nestyle.config import CompilerOptions
from nestyle.model.diagnostic import Severity


@click.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--mixin", "as_mixin", is_flag=True, help="Check a mixin fragment")
@click.option("--strict", is_flag=True, help="Treat indentation warnings as errors")
def check(template: str, as_mixin: bool, strict: bool) -> None:
    """Compile a template and print its diagnostics.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    """
    path = Path(template)
    source = path.read_text(encoding="utf-8")
    options = CompilerOptions(strict_indentation=strict)

    if as_mixin:
        _, diagnostics = check_mixin(source, options)
    else:
        _, diagnostics = check_template(source, options)

    if not diagnostics:
        click.echo(f"OK: {path.name} compiles cleanly (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    sys.exit(1 if errors else 0)
