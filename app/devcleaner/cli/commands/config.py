"""Configuration commands.

Shows, locates and initializes ~/.config/devcleaner/config.toml.
"""

from typing import Annotated

import typer

from devcleaner.cli.types import require_config
from devcleaner.core.config import AppConfig, ConfigError, save_config
from devcleaner.core.paths import get_config_path
from devcleaner.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize the configuration file.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = require_config()
    config_path = get_config_path()
    source = str(config_path) if config_path.exists() else "defaults (no config file)"

    console.print(f"[muted]Source:[/] {source}")
    console.print(f"[bold]search_dir[/] = {config.search_dir}")
    console.print(f"[bold]assume_yes[/] = {str(config.assume_yes).lower()}")
    if config.profiles:
        console.print(f"[bold]profiles[/] = {', '.join(sorted(config.profiles))}")


@app.command()
def init(
    search_dir: Annotated[
        str,
        typer.Option("--search-dir", "-d", help="Default directory to search for projects."),
    ] = ".",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Create a configuration file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(AppConfig(search_dir=search_dir), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
