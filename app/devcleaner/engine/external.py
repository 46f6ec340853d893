"""External cache-clean tool invocation.

Tools such as ``fvm destroy`` or ``flutter cache clean`` are opaque:
only their exit status matters. Output is logged at debug level and
never interpreted.
"""

import logging
import os
import subprocess

from devcleaner.core.paths import expand_user_path
from devcleaner.engine.models import RemovalResult
from devcleaner.profiles.models import CommandSpec
from devcleaner.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


def resolve_executable(spec: CommandSpec) -> str | None:
    """Find the executable to run for ``spec``.

    Locations listed in ``spec.search_paths`` win over a PATH lookup,
    so a tool's private install (e.g. PlatformIO's penv) is preferred.

    Args:
        spec: Command to resolve.

    Returns:
        Path or name of the executable, or None if it is not installed.
    """
    for candidate in spec.search_paths:
        path = expand_user_path(candidate)
        if path.is_file() and os.access(path, os.X_OK):
            return str(path)

    if command_exists(spec.executable):
        return spec.executable
    return None


def run_external(spec: CommandSpec, *, dry_run: bool = False) -> RemovalResult:
    """Run an external tool in the current working directory.

    A tool that is not installed is skipped (``attempted=False``), just
    like a cache directory that does not exist.

    Args:
        spec: Command to run.
        dry_run: Log the command instead of running it.

    Returns:
        RemovalResult keyed by the command line; ``error`` is set on a
        non-zero exit or when the tool cannot be started.
    """
    command_line = spec.display()

    executable = resolve_executable(spec)
    if executable is None:
        logger.info("%s not found, skipping: %s", spec.executable, command_line)
        return RemovalResult(path=command_line, attempted=False, dry_run=dry_run)

    if dry_run:
        logger.info("Dry-run: would run %s", command_line)
        return RemovalResult(path=command_line, attempted=True, dry_run=True)

    try:
        result = run_command([executable, *spec.args[1:]], input_text=spec.stdin)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Failed to run %s: %s", command_line, e)
        return RemovalResult(path=command_line, attempted=True, error=f"Failed to start: {e}")

    logger.debug("%s stdout: %s", command_line, result.stdout.strip())
    logger.debug("%s stderr: %s", command_line, result.stderr.strip())

    if not result.success:
        logger.warning("%s exited with code %d", command_line, result.returncode)
        return RemovalResult(
            path=command_line,
            attempted=True,
            error=f"Exited with code {result.returncode}",
        )

    return RemovalResult(path=command_line, attempted=True, deleted=True)
