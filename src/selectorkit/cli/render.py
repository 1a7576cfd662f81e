"""CLI command: selectorkit render -- render a selector tree from JSON."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from selectorkit.config import BuilderConfig
from selectorkit.errors import DecodeError, SelectorError
from selectorkit.selector import SelectorFacade, load_tree


@click.command()
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Only allow the ' ', '+', '~', '>' combinators")
def render(jsonfile: str, strict: bool) -> None:
    """Load a JSON selector description and print the rendered selector.

    Exits with code 1 if the file is malformed or breaks the selector rules.
    """
    path = Path(jsonfile)
    facade = SelectorFacade(BuilderConfig(strict_combinators=strict))

    try:
        node = load_tree(path.read_text(encoding="utf-8"), facade)
    except DecodeError as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(node.stringify())
