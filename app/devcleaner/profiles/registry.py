"""Toolchain profile registry.

Loads the bundled profile table once and merges user-defined profiles
from the configuration file on top of it.
"""

import logging
import tomllib
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from typing import Any

from pydantic import ValidationError

from devcleaner.profiles.models import ToolchainProfile

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when a profile table cannot be loaded or validated."""


def parse_profiles(raw: Mapping[str, Any], source: str) -> dict[str, ToolchainProfile]:
    """Validate a mapping of ``name -> profile table``.

    The table key becomes the profile name.

    Args:
        raw: Profile tables keyed by name.
        source: Where the tables came from, for error messages.

    Returns:
        Validated profiles keyed by name.

    Raises:
        ProfileError: If any profile is invalid.
    """
    profiles: dict[str, ToolchainProfile] = {}
    for name, table in raw.items():
        if not isinstance(table, Mapping):
            raise ProfileError(f"Profile '{name}' in {source} must be a table")
        try:
            profiles[name] = ToolchainProfile.model_validate({**table, "name": name})
        except ValidationError as e:
            raise ProfileError(f"Invalid profile '{name}' in {source}: {e}") from e
    return profiles


@lru_cache(maxsize=1)
def load_bundled_profiles() -> dict[str, ToolchainProfile]:
    """Load the profiles shipped in ``devcleaner/data/profiles.toml``.

    Returns:
        Built-in profiles keyed by name.

    Raises:
        ProfileError: If the bundled file is missing or malformed.
    """
    resource = resources.files("devcleaner.data").joinpath("profiles.toml")
    try:
        data = tomllib.loads(resource.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ProfileError(f"Invalid TOML syntax in bundled profiles: {e}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read bundled profiles: {e}") from e

    return parse_profiles(data.get("profiles", {}), "bundled profiles")


def get_profiles(user_profiles: Mapping[str, Any] | None = None) -> dict[str, ToolchainProfile]:
    """Return all available profiles, user definitions overriding built-ins.

    Args:
        user_profiles: Raw profile tables from the user's configuration.

    Returns:
        Profiles keyed by name, sorted by name.

    Raises:
        ProfileError: If a user profile is invalid.
    """
    profiles = dict(load_bundled_profiles())
    if user_profiles:
        overrides = parse_profiles(user_profiles, "user configuration")
        for name in overrides:
            if name in profiles:
                logger.debug("User configuration overrides built-in profile '%s'", name)
        profiles.update(overrides)
    return dict(sorted(profiles.items()))


def get_profile(name: str, user_profiles: Mapping[str, Any] | None = None) -> ToolchainProfile:
    """Look up a single profile by name.

    Args:
        name: Profile identifier.
        user_profiles: Raw profile tables from the user's configuration.

    Returns:
        The matching profile.

    Raises:
        ProfileError: If no profile has that name.
    """
    profiles = get_profiles(user_profiles)
    try:
        return profiles[name]
    except KeyError:
        available = ", ".join(profiles)
        raise ProfileError(f"Unknown profile '{name}' (available: {available})") from None
