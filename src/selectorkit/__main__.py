"""Module entry point for ``python -m selectorkit``."""

from selectorkit.cli.main import cli

if __name__ == "__main__":
    cli()
