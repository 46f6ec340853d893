"""Profile listing commands.

Shows the built-in and user-defined toolchain profiles.
"""

import json
from typing import Annotated

import typer
from rich.table import Table

from devcleaner.cli.types import (
    OutputFormat,
    complete_profile_name,
    require_config,
    require_profile,
)
from devcleaner.profiles.registry import ProfileError, get_profiles
from devcleaner.utils.formatting import console, print_error

app = typer.Typer(
    help="List and inspect toolchain profiles.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command(name="list")
def list_profiles(
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List available toolchain profiles."""
    config = require_config()
    try:
        profiles = get_profiles(config.profiles)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = [profile.model_dump(mode="json") for profile in profiles.values()]
        console.print_json(json.dumps(data))
        return

    table = Table(title="Toolchain Profiles", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Manifest", style="info")
    table.add_column("Actions", justify="right")
    table.add_column("Description", style="dim")
    for profile in profiles.values():
        table.add_row(
            profile.name,
            profile.manifest_pattern or "(global)",
            str(len(profile.actions)),
            profile.description or "-",
        )
    console.print(table)


@app.command()
def show(
    name: Annotated[
        str,
        typer.Argument(help="Profile name.", autocompletion=complete_profile_name),
    ],
) -> None:
    """Show the ordered actions of a profile."""
    profile = require_profile(name, require_config())

    kind = profile.manifest_pattern or "global"
    console.print(f"[bold_header]{profile.name}[/] [muted]({kind})[/]")
    if profile.description:
        console.print(f"[text]{profile.description}[/]")

    table = Table(show_lines=False)
    table.add_column("#", justify="right", width=3)
    table.add_column("Action", style="bold")
    table.add_column("Only if", style="muted")
    table.add_column("Targets / Command", style="info")
    for index, action in enumerate(profile.actions, start=1):
        detail = action.command.display() if action.command else ", ".join(action.targets)
        if action.requires_elevation:
            detail = f"{detail} [warning](sudo)[/]"
        table.add_row(str(index), action.describe(), action.precondition or "-", detail)
    console.print(table)

    if profile.global_post_action is not None:
        console.print(f"[muted]Afterwards:[/] {profile.global_post_action.display()}")
