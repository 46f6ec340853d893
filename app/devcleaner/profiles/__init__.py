"""Toolchain profiles: data-only descriptions of how to clean each ecosystem."""

from devcleaner.profiles.models import CommandSpec, RemovalAction, ToolchainProfile
from devcleaner.profiles.registry import (
    ProfileError,
    get_profile,
    get_profiles,
    load_bundled_profiles,
    parse_profiles,
)

__all__ = [
    "CommandSpec",
    "ProfileError",
    "RemovalAction",
    "ToolchainProfile",
    "get_profile",
    "get_profiles",
    "load_bundled_profiles",
    "parse_profiles",
]
