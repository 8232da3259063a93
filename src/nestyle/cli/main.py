"""nestyle CLI entry point: Click group with subcommands."""

import logging

import click

from nestyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="nestyle")
@click.option("--verbose", "-v", is_flag=True, help="Log compiler stages to stderr")
def cli(verbose: bool) -> None:
    """nestyle - compile nested stylesheet templates into flat CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from nestyle.cli.check import check  # noqa: E402
from nestyle.cli.flatten import flatten  # noqa: E402
from nestyle.cli.render import render  # noqa: E402

cli.add_command(render)
cli.add_command(check)
cli.add_command(flatten)
