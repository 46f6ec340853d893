"""CLI package for devcleaner.

This package contains the Typer application and all subcommands.
"""

from devcleaner.cli.main import app

__all__ = ["app"]
