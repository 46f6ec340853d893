"""Unit tests for profile listing commands."""

from pathlib import Path

from devcleaner.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestProfilesList:
    """Tests for devcleaner profiles list."""

    def test_table(self) -> None:
        """All built-in profiles are listed."""
        result = runner.invoke(app, ["profiles", "list"])

        assert result.exit_code == 0
        for name in ("flutter", "platformio", "visualstudio", "node"):
            assert name in result.output

    def test_json(self) -> None:
        """JSON output includes manifest patterns."""
        result = runner.invoke(app, ["profiles", "list", "--format", "json"])

        assert result.exit_code == 0
        assert '"manifest_pattern"' in result.output
        assert '"pubspec.yaml"' in result.output
        assert '"manifest_pattern": null' in result.output

    def test_includes_user_profiles(self, isolated_config_home: Path) -> None:
        """Profiles from the config file are listed too."""
        config_file = isolated_config_home / "devcleaner" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            '[profiles.gradle]\nmanifest_pattern = "settings.gradle"\n'
            '[[profiles.gradle.actions]]\ntargets = ["build"]\n'
        )

        result = runner.invoke(app, ["profiles", "list"])

        assert result.exit_code == 0
        assert "gradle" in result.output

    def test_invalid_user_profile(self, isolated_config_home: Path) -> None:
        """An invalid user profile exits with code 1."""
        config_file = isolated_config_home / "devcleaner" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text('[profiles.gradle]\nmanifest_pattern = "app/build.gradle"\n')

        result = runner.invoke(app, ["profiles", "list"])

        assert result.exit_code == 1
        assert "Invalid profile" in result.output


class TestProfilesShow:
    """Tests for devcleaner profiles show."""

    def test_show_flutter(self) -> None:
        """Actions and the post action are displayed."""
        result = runner.invoke(app, ["profiles", "show", "flutter"])

        assert result.exit_code == 0
        assert "pubspec.yaml" in result.output
        assert "Afterwards:" in result.output
        assert "flutter cache clean" in result.output

    def test_show_unknown(self) -> None:
        """Unknown profiles exit with code 1."""
        result = runner.invoke(app, ["profiles", "show", "cobol"])

        assert result.exit_code == 1
        assert "Unknown profile" in result.output

    def test_show_global(self) -> None:
        """Global profiles are marked as such in the heading."""
        result = runner.invoke(app, ["profiles", "show", "android"])

        assert result.exit_code == 0
        assert "android (global)" in result.output
