"""Unit tests for configuration commands."""

import tomllib
from pathlib import Path

from devcleaner.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigPath:
    """Tests for devcleaner config path."""

    def test_prints_xdg_path(self, isolated_config_home: Path) -> None:
        """The path honours XDG_CONFIG_HOME."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.output.strip() == str(isolated_config_home / "devcleaner" / "config.toml")


class TestConfigInit:
    """Tests for devcleaner config init."""

    def test_creates_file(self, isolated_config_home: Path) -> None:
        """init writes a config file with the given search directory."""
        result = runner.invoke(app, ["config", "init", "--search-dir", "~/Projects"])

        assert result.exit_code == 0
        assert "Config written" in result.output
        with open(isolated_config_home / "devcleaner" / "config.toml", "rb") as f:
            data = tomllib.load(f)
        assert data == {"search_dir": "~/Projects", "assume_yes": False}

    def test_existing_file_kept(self, isolated_config_home: Path) -> None:
        """init does not overwrite without --force."""
        config_file = isolated_config_home / "devcleaner" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text('search_dir = "/srv"\n')

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert config_file.read_text() == 'search_dir = "/srv"\n'

    def test_force_overwrites(self, isolated_config_home: Path) -> None:
        """--force replaces an existing file."""
        config_file = isolated_config_home / "devcleaner" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text('search_dir = "/srv"\n')

        result = runner.invoke(app, ["config", "init", "-f", "-d", "/home"])

        assert result.exit_code == 0
        assert 'search_dir = "/home"' in config_file.read_text()


class TestConfigShow:
    """Tests for devcleaner config show."""

    def test_defaults(self) -> None:
        """Without a file the defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "defaults" in result.output
        assert "search_dir" in result.output

    def test_file_values(self, isolated_config_home: Path) -> None:
        """Values from the config file are shown."""
        config_file = isolated_config_home / "devcleaner" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text('search_dir = "/srv/src"\nassume_yes = true\n')

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "/srv/src" in result.output
        assert "assume_yes = true" in result.output
