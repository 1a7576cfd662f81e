"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selector strings from structured parts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
