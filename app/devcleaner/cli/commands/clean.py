"""Clean command implementation.

Finds projects of one toolchain below a directory and removes their
build artifacts and caches.
"""

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from devcleaner.cli.types import complete_profile_name, require_config, require_profile
from devcleaner.core.paths import expand_user_path
from devcleaner.engine.elevation import ElevationToken, acquire_elevation
from devcleaner.engine.errors import ElevationError
from devcleaner.engine.models import CleanupOutcome, Failure, ProjectCleanOutcome
from devcleaner.engine.run import CleanupRun
from devcleaner.utils.formatting import (
    console,
    create_project_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def clean(
    profile_name: Annotated[
        str,
        typer.Argument(
            metavar="PROFILE",
            help="Toolchain profile (see 'devcleaner profiles list').",
            autocompletion=complete_profile_name,
        ),
    ],
    search_dir: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to search for projects (default: config search_dir).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    sudo: Annotated[
        bool,
        typer.Option("--sudo", help="Acquire sudo once for actions that need it."),
    ] = False,
) -> None:
    """Clean build artifacts of every project of PROFILE below a directory.

    Global profiles (no manifest) clean caches in the home directory.
    """
    config = require_config()
    profile = require_profile(profile_name, config)

    if profile.is_global:
        if search_dir is not None:
            print_warning(f"{profile.name} cleans global caches; ignoring {search_dir}")
        target = expand_user_path("~")
        prompt = f"Delete global {profile.name} caches in {target}?"
        scope = f"global {profile.name} caches in"
    else:
        target = expand_user_path(
            str(search_dir) if search_dir is not None else config.search_dir
        )
        prompt = f"Delete {profile.name} build artifacts in projects below {target}?"
        scope = f"{profile.name} projects recursively from"

    if not target.is_dir():
        print_error(f"Directory not found: {target}")
        raise typer.Exit(code=1)

    if not dry_run and not yes and not config.assume_yes:
        confirmed = typer.confirm(prompt, default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    elevation: ElevationToken | None = None
    if sudo:
        try:
            elevation = acquire_elevation()
        except ElevationError as e:
            print_warning(f"Continuing without elevated privileges: {e}")

    label = "Previewing" if dry_run else "Cleaning"
    print_info(f"{label} {scope}: {target}")

    with _cancel_on_interrupt() as cancel_requested:
        run = CleanupRun(
            elevation=elevation,
            on_project=_print_project_progress,
            should_cancel=cancel_requested.is_set,
        )
        outcome = run.run(target, profile, dry_run=dry_run)

    if outcome.error is not None:
        print_error(outcome.error)
        raise typer.Exit(code=1)

    if outcome.projects_scanned == 0:
        print_info(f"No {profile.name} projects found in: {target}")
    else:
        _print_project_table(outcome)
        if dry_run:
            _print_preview(outcome)

    if outcome.failures:
        _print_failures(outcome.failures)

    _print_summary(outcome)

    if outcome.failures:
        raise typer.Exit(code=1)


# === Private helper functions ===


@contextmanager
def _cancel_on_interrupt() -> Iterator[threading.Event]:
    """Turn the first Ctrl+C into a request to stop between projects.

    A second Ctrl+C raises KeyboardInterrupt as usual.
    """
    requested = threading.Event()

    def _handler(signum: int, frame: object) -> None:
        if requested.is_set():
            raise KeyboardInterrupt
        requested.set()
        print_warning("Stopping after the current project (Ctrl+C again to abort).")

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield requested
    finally:
        signal.signal(signal.SIGINT, previous)


def _print_project_progress(project: ProjectCleanOutcome) -> None:
    """Print a one-line status after each project."""
    path = project.project.root_path
    if project.actions_failed:
        console.print(f"  [warning]![/] {path} [muted]({project.actions_failed} failed)[/]")
    else:
        console.print(f"  [success]✓[/] {path}")


def _print_project_table(outcome: CleanupOutcome) -> None:
    """Display per-project action counts."""
    title = "Projects (dry-run)" if outcome.dry_run else "Cleaned Projects"
    table = create_project_table(title)
    for project in outcome.projects:
        icon = "[success]✓[/]" if project.cleaned else "[error]✕[/]"
        failed = f"[error]{project.actions_failed}[/]" if project.actions_failed else "0"
        table.add_row(
            icon,
            str(project.project.root_path),
            str(project.actions_attempted),
            failed,
            str(project.actions_skipped),
        )
    console.print(table)


def _print_preview(outcome: CleanupOutcome) -> None:
    """Display paths and commands a real run would act on."""
    table = Table(title="Would Delete (dry-run)", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Size", justify="right", width=12)

    for project in outcome.projects:
        for result in project.results:
            if result.attempted:
                table.add_row(result.path, f"[dry_run]{result.size_estimate or 'command'}[/]")

    console.print(table)


def _print_failures(failures: list[Failure]) -> None:
    """Display every recorded failure."""
    table = Table(title="Failures", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Reason", style="error")
    for failure in failures:
        table.add_row(failure.path, failure.reason)
    console.print(table)


def _print_summary(outcome: CleanupOutcome) -> None:
    """Display the final counts and freed space."""
    counts = f"{outcome.projects_cleaned} of {outcome.projects_scanned} project(s)"
    if outcome.dry_run:
        print_info(f"Dry-run complete: {counts} would be cleaned. No files were deleted.")
        return

    message = f"Cleaned {counts}, freed [freed]{outcome.freed_display}[/]"
    if outcome.cancelled:
        print_warning(f"Cancelled. {message}")
    elif outcome.failures:
        print_warning(f"{message} with {len(outcome.failures)} failure(s)")
    else:
        print_success(message)
