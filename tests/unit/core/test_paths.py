"""Unit tests for XDG path management.

Tests for the paths module that provides XDG-compliant directory paths.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from devcleaner.core.paths import (
    APP_NAME,
    ensure_config_dir,
    expand_user_path,
    get_config_dir,
    get_config_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_falls_back(self) -> None:
        """An empty XDG_CONFIG_HOME is treated as unset."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for config and theme file paths."""

    def test_config_path(self, isolated_config_home: Path) -> None:
        """The config file lives in the config directory."""
        assert get_config_path() == isolated_config_home / APP_NAME / "config.toml"

    def test_theme_path(self, isolated_config_home: Path) -> None:
        """The theme override lives next to the config file."""
        assert get_theme_path() == isolated_config_home / APP_NAME / "theme.toml"


class TestEnsureConfigDir:
    """Tests for ensure_config_dir function."""

    def test_creates_directory(self, isolated_config_home: Path) -> None:
        """ensure_config_dir creates the directory tree."""
        result = ensure_config_dir()

        assert result.is_dir()
        assert result == isolated_config_home / APP_NAME

    def test_idempotent(self) -> None:
        """Calling twice is harmless."""
        assert ensure_config_dir() == ensure_config_dir()

    def test_permission_error(self) -> None:
        """Permission problems become RuntimeError."""
        with (
            patch("pathlib.Path.mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()


class TestExpandUserPath:
    """Tests for expand_user_path function."""

    def test_expands_home(self) -> None:
        """A leading tilde expands to the home directory."""
        assert expand_user_path("~/Projects") == Path.home() / "Projects"

    def test_relative_becomes_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative paths are anchored at the current directory."""
        monkeypatch.chdir(tmp_path)

        assert expand_user_path("apps") == Path(os.getcwd()) / "apps"

    def test_does_not_resolve_symlinks(self, tmp_path: Path) -> None:
        """Symlinked search roots keep their spelling."""
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)

        assert expand_user_path(str(link)) == link
