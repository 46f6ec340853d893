"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from devcleaner.core.config import AppConfig, ConfigError, load_config
from devcleaner.profiles.models import ToolchainProfile
from devcleaner.profiles.registry import ProfileError, get_profile, get_profiles
from devcleaner.utils.formatting import print_error, print_info


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def require_config() -> AppConfig:
    """Load the user configuration or exit with a helpful error message.

    Returns:
        Loaded configuration (defaults if no config file exists).

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        print_info("Run 'devcleaner config path' to locate the file.")
        raise typer.Exit(code=1) from e


def require_profile(name: str, config: AppConfig) -> ToolchainProfile:
    """Look up a profile or exit with a helpful error message.

    Args:
        name: Profile identifier given on the command line.
        config: User configuration holding custom profiles.

    Returns:
        The requested profile.

    Raises:
        typer.Exit: If the profile does not exist or is invalid.
    """
    try:
        return get_profile(name, config.profiles)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def complete_profile_name(incomplete: str) -> list[str]:
    """Shell completion for profile names."""
    try:
        names = get_profiles(load_config().profiles)
    except (ConfigError, ProfileError):
        return []
    return [name for name in names if name.startswith(incomplete)]
