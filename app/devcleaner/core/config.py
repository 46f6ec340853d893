"""Application configuration.

Configuration is stored in ``~/.config/devcleaner/config.toml``:

    search_dir = "~/Projects"
    assume_yes = false

    [profiles.gradle]
    manifest_pattern = "settings.gradle"
    [[profiles.gradle.actions]]
    targets = ["build", ".gradle"]

A missing file means "use defaults"; a malformed one is an error.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from devcleaner.core.paths import get_config_path


class AppConfig(BaseModel):
    """User configuration for devcleaner.

    Attributes:
        search_dir: Default directory searched for projects.
        assume_yes: Skip the confirmation prompt before deleting.
        profiles: Raw user profile tables, validated by the profile registry.
    """

    model_config = ConfigDict(extra="forbid")

    search_dir: Annotated[str, Field(min_length=1, description="Default search directory")] = "."
    assume_yes: Annotated[bool, Field(description="Skip confirmation prompts")] = False
    profiles: Annotated[
        dict[str, dict[str, Any]],
        Field(description="User-defined or overriding toolchain profiles"),
    ] = {}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AppConfig (defaults if the file does not exist).

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def save_config(config: AppConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The AppConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to a dictionary for TOML serialization.

    Empty profile tables are omitted to keep the file clean.
    """
    result: dict[str, Any] = {
        "search_dir": config.search_dir,
        "assume_yes": config.assume_yes,
    }
    if config.profiles:
        result["profiles"] = config.profiles
    return result
