"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from devcleaner.profiles.models import CommandSpec, RemovalAction, ToolchainProfile
from devcleaner.profiles.registry import load_bundled_profiles


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def no_external_tools(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend no external cache-clean tools are installed.

    Tests that exercise command actions patch ``command_exists`` back on.
    """
    monkeypatch.setattr("devcleaner.engine.external.command_exists", lambda _name: False)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory to build project trees in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty temporary directory."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    return path


@pytest.fixture
def make_tool(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory writing an executable shell script into a bin directory."""

    def _make(name: str, body: bytes) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / name
        script.write_bytes(b"#!/bin/sh\n" + body)
        script.chmod(0o755)
        return script

    return _make


@pytest.fixture
def flutter_profile() -> ToolchainProfile:
    """The bundled Flutter profile."""
    return load_bundled_profiles()["flutter"]


@pytest.fixture
def make_profile() -> Callable[..., ToolchainProfile]:
    """Factory for small test profiles."""

    def _make(
        *actions: RemovalAction,
        manifest_pattern: str | None = "project.toml",
        global_post_action: CommandSpec | None = None,
        skip_dirs: tuple[str, ...] = (),
    ) -> ToolchainProfile:
        return ToolchainProfile(
            name="test",
            manifest_pattern=manifest_pattern,
            actions=actions,
            global_post_action=global_post_action,
            skip_dirs=skip_dirs,
        )

    return _make


@pytest.fixture
def make_flutter_project() -> Callable[[Path], Path]:
    """Factory creating a Flutter project with build output and a Dart tool cache."""

    def _make(root: Path) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        (root / "pubspec.yaml").write_text("name: app\n")
        (root / "build" / "outputs").mkdir(parents=True)
        (root / "build" / "outputs" / "app.apk").write_bytes(b"\0" * 4096)
        (root / ".dart_tool").mkdir()
        (root / ".dart_tool" / "package_config.json").write_text("{}")
        (root / "lib").mkdir()
        (root / "lib" / "main.dart").write_text("void main() {}\n")
        return root

    return _make
