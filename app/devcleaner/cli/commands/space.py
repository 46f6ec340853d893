"""Free space report."""

from pathlib import Path
from typing import Annotated

import typer

from devcleaner.core.paths import expand_user_path
from devcleaner.engine.space import SpaceAccountant
from devcleaner.utils.formatting import console, print_error


def space(
    path: Annotated[
        Path,
        typer.Argument(help="Any path on the volume to inspect."),
    ] = Path("."),
) -> None:
    """Show free space on the volume holding PATH."""
    target = expand_user_path(str(path))
    if not target.exists():
        print_error(f"Path not found: {target}")
        raise typer.Exit(code=1)

    accountant = SpaceAccountant(target)
    free = accountant.snapshot()
    if free is None:
        print_error(f"Cannot determine free space for {target}")
        raise typer.Exit(code=1)

    console.print(
        f"[success]Free space:[/] {accountant.format_kb(free // 1024)} [muted]({target})[/]"
    )
