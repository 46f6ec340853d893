"""Per-project cleanup.

Applies a toolchain profile's ordered actions to one discovered project.
Each action is isolated: a locked file in one subdirectory never stops
the remaining actions for the same project.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from devcleaner.engine.elevation import ElevationToken
from devcleaner.engine.external import run_external
from devcleaner.engine.models import Failure, ProjectCleanOutcome, ProjectRef, RemovalResult
from devcleaner.engine.remover import PathRemover, expand_target
from devcleaner.profiles.models import RemovalAction, ToolchainProfile

logger = logging.getLogger(__name__)


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Temporarily change the process working directory.

    The previous working directory is restored on every exit path,
    including exceptions raised inside the block.

    Args:
        path: Directory to switch to.

    Yields:
        The directory switched to.
    """
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


class ProjectCleaner:
    """Runs a profile's removal actions against a single project.

    Args:
        remover: PathRemover used for path targets.
        elevation: Token passed to removals that require elevation.
    """

    def __init__(
        self,
        remover: PathRemover | None = None,
        elevation: ElevationToken | None = None,
    ) -> None:
        self._remover = remover or PathRemover()
        self._elevation = elevation

    def clean(
        self,
        project: ProjectRef,
        profile: ToolchainProfile,
        dry_run: bool = False,
    ) -> ProjectCleanOutcome:
        """Apply every action of ``profile`` to ``project``, in order.

        Args:
            project: Discovered project root.
            profile: Toolchain profile describing the actions.
            dry_run: Preview removals and commands without executing them.

        Returns:
            ProjectCleanOutcome with per-action counts and failures.
        """
        outcome = ProjectCleanOutcome(project=project)

        for action in profile.actions:
            if not self._precondition_holds(project.root_path, action):
                logger.debug(
                    "Skipping '%s' in %s: %s not present",
                    action.describe(),
                    project.root_path,
                    action.precondition,
                )
                outcome.actions_skipped += 1
                continue

            logger.debug("%s in %s", action.describe(), project.root_path)
            results = self._run_action(project.root_path, action, dry_run)
            outcome.results.extend(results)

            if not any(r.attempted for r in results):
                continue
            outcome.actions_attempted += 1

            errors = [r for r in results if r.failed]
            if errors:
                outcome.actions_failed += 1
                outcome.failures.extend(
                    Failure(path=r.path, reason=r.error or "Unknown error") for r in errors
                )

        return outcome

    @staticmethod
    def _precondition_holds(root: Path, action: RemovalAction) -> bool:
        if action.precondition is None:
            return True
        return os.path.lexists(root / os.path.expanduser(action.precondition))

    def _run_action(
        self,
        root: Path,
        action: RemovalAction,
        dry_run: bool,
    ) -> list[RemovalResult]:
        if action.command is not None:
            try:
                with working_directory(root):
                    return [run_external(action.command, dry_run=dry_run)]
            except OSError as e:
                logger.warning("Cannot enter %s: %s", root, e)
                return [
                    RemovalResult(
                        path=action.command.display(),
                        attempted=True,
                        error=f"Cannot enter project directory: {e}",
                    )
                ]

        results: list[RemovalResult] = []
        for template in action.targets:
            for path in expand_target(root, template):
                results.append(
                    self._remover.remove(
                        path,
                        recursive=action.recursive,
                        dry_run=dry_run,
                        elevated=action.requires_elevation,
                        elevation=self._elevation,
                    )
                )
        return results
