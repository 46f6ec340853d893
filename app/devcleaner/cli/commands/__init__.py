"""CLI commands for devcleaner.

This package contains all subcommand implementations.
"""

from devcleaner.cli.commands import clean, config, profiles, space

__all__ = ["clean", "config", "profiles", "space"]
