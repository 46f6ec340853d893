"""Unit tests for toolchain profile models."""

import pytest
from devcleaner.profiles.models import CommandSpec, RemovalAction, ToolchainProfile
from pydantic import ValidationError


class TestCommandSpec:
    """Tests for CommandSpec model."""

    def test_executable_and_display(self) -> None:
        """The first argument is the executable."""
        spec = CommandSpec(args=("pio", "run", "-t", "clean"))

        assert spec.executable == "pio"
        assert spec.display() == "pio run -t clean"
        assert spec.stdin is None

    def test_requires_args(self) -> None:
        """An empty command is invalid."""
        with pytest.raises(ValidationError):
            CommandSpec(args=())

    def test_frozen(self) -> None:
        """Specs are immutable."""
        spec = CommandSpec(args=("fvm", "destroy"))

        with pytest.raises(ValidationError):
            spec.stdin = "y\n"  # type: ignore[misc]


class TestRemovalAction:
    """Tests for RemovalAction model."""

    def test_target_action(self) -> None:
        """Target actions default to recursive, unprivileged removal."""
        action = RemovalAction(targets=("build",))

        assert action.is_command is False
        assert action.recursive is True
        assert action.requires_elevation is False
        assert action.describe() == "Remove build"

    def test_command_action(self) -> None:
        """Command actions describe their command line."""
        action = RemovalAction(command=CommandSpec(args=("fvm", "destroy")))

        assert action.is_command is True
        assert action.describe() == "Run fvm destroy"

    def test_label_wins(self) -> None:
        """An explicit label is used as the description."""
        assert RemovalAction(label="Gradle", targets=("android/.gradle",)).describe() == "Gradle"

    def test_neither_targets_nor_command(self) -> None:
        """An action must do something."""
        with pytest.raises(ValidationError, match="exactly one"):
            RemovalAction()

    def test_both_targets_and_command(self) -> None:
        """An action cannot both delete paths and run a command."""
        with pytest.raises(ValidationError, match="exactly one"):
            RemovalAction(targets=("build",), command=CommandSpec(args=("make", "clean")))

    def test_unknown_field(self) -> None:
        """Typos in profile tables are rejected."""
        with pytest.raises(ValidationError):
            RemovalAction.model_validate({"targets": ["build"], "recursve": False})


class TestToolchainProfile:
    """Tests for ToolchainProfile model."""

    def test_from_mapping(self) -> None:
        """Profiles validate from TOML-shaped data."""
        profile = ToolchainProfile.model_validate(
            {
                "name": "gradle",
                "manifest_pattern": "settings.gradle",
                "actions": [{"targets": ["build", ".gradle"]}],
                "global_post_action": {"args": ["gradle", "--stop"]},
            }
        )

        assert profile.actions[0].targets == ("build", ".gradle")
        assert profile.global_post_action is not None
        assert profile.global_post_action.display() == "gradle --stop"
        assert profile.skip_dirs == ()

    @pytest.mark.parametrize("pattern", ["app/pubspec.yaml", "sub\\x.sln"])
    def test_manifest_pattern_rejects_separators(self, pattern: str) -> None:
        """Manifest patterns match file names only."""
        with pytest.raises(ValidationError, match="file name or glob"):
            ToolchainProfile(name="bad", manifest_pattern=pattern)

    def test_manifest_pattern_glob(self) -> None:
        """Glob patterns are allowed."""
        assert ToolchainProfile(name="vs", manifest_pattern="*.sln").manifest_pattern == "*.sln"

    def test_without_manifest_is_global(self) -> None:
        """A profile without a manifest pattern cleans global caches."""
        profile = ToolchainProfile(name="caches", actions=(RemovalAction(targets=("~/.cache/x",)),))

        assert profile.manifest_pattern is None
        assert profile.is_global is True
        assert ToolchainProfile(name="vs", manifest_pattern="*.sln").is_global is False

    def test_empty_manifest_pattern_rejected(self) -> None:
        """An empty pattern is not the same as a global profile."""
        with pytest.raises(ValidationError):
            ToolchainProfile(name="bad", manifest_pattern="")


class TestCommandSearchPaths:
    """Tests for CommandSpec executable locations."""

    def test_search_paths_default_empty(self) -> None:
        """Commands are looked up on PATH unless locations are given."""
        assert CommandSpec(args=("pio", "run")).search_paths == ()

    def test_search_paths_do_not_change_display(self) -> None:
        """The displayed command line keeps the short executable name."""
        spec = CommandSpec.model_validate(
            {"args": ["pio", "run"], "search_paths": ["~/.platformio/penv/bin/pio"]}
        )

        assert spec.search_paths == ("~/.platformio/penv/bin/pio",)
        assert spec.executable == "pio"
        assert spec.display() == "pio run"
