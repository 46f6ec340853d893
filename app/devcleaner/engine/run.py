"""Cleanup run orchestration.

Drives one full pass for a toolchain profile: discover projects, clean
each one, run the profile's global post action, and measure the free
space gained.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from devcleaner.core.paths import expand_user_path
from devcleaner.engine.cleaner import ProjectCleaner
from devcleaner.engine.elevation import ElevationToken
from devcleaner.engine.errors import SearchDirectoryNotFoundError
from devcleaner.engine.external import run_external
from devcleaner.engine.models import (
    CleanupOutcome,
    Failure,
    ProjectCleanOutcome,
    ProjectRef,
    RunState,
)
from devcleaner.engine.scanner import ProjectScanner
from devcleaner.engine.space import SpaceAccountant
from devcleaner.profiles.models import ToolchainProfile

logger = logging.getLogger(__name__)

ProjectCallback = Callable[[ProjectCleanOutcome], None]
CancelCheck = Callable[[], bool]


class CleanupRun:
    """Single forward pass over all projects of one toolchain.

    Args:
        cleaner: ProjectCleaner applying per-project actions.
        accountant: SpaceAccountant measuring free space.
        elevation: Token for elevated removals (used when no cleaner
            is supplied).
        on_project: Called after each project is processed.
        should_cancel: Checked between projects; when it returns True
            the remaining projects are not visited.
    """

    def __init__(
        self,
        *,
        cleaner: ProjectCleaner | None = None,
        accountant: SpaceAccountant | None = None,
        elevation: ElevationToken | None = None,
        on_project: ProjectCallback | None = None,
        should_cancel: CancelCheck | None = None,
    ) -> None:
        self._cleaner = cleaner or ProjectCleaner(elevation=elevation)
        self._accountant = accountant
        self._on_project = on_project
        self._should_cancel = should_cancel
        self._state = RunState.IDLE

    @property
    def state(self) -> RunState:
        """Current lifecycle state."""
        return self._state

    def _advance(self, state: RunState, outcome: CleanupOutcome) -> None:
        logger.debug("Run state %s -> %s", self._state.value, state.value)
        self._state = state
        outcome.state = state

    def run(
        self,
        search_dir: Path | str,
        profile: ToolchainProfile,
        dry_run: bool = False,
    ) -> CleanupOutcome:
        """Clean every project of ``profile`` found below ``search_dir``.

        A global profile has no projects: its actions run once against
        the home directory and ``search_dir`` is ignored.

        Per-item failures are recorded on the outcome; only a missing
        search directory ends the run early, with ``error`` set.

        Args:
            search_dir: Directory to scan.
            profile: Toolchain profile to apply.
            dry_run: Preview only; nothing is deleted or executed.

        Returns:
            The final CleanupOutcome.

        Raises:
            RuntimeError: If this CleanupRun was already used.
        """
        if self._state is not RunState.IDLE:
            raise RuntimeError("CleanupRun instances are single-use")

        root = expand_user_path("~" if profile.is_global else str(search_dir))
        outcome = CleanupOutcome(profile=profile.name, search_dir=str(root), dry_run=dry_run)
        accountant = self._accountant or SpaceAccountant(root if root.is_dir() else Path.cwd())
        before = None if dry_run else accountant.snapshot()

        self._advance(RunState.SCANNING, outcome)
        try:
            projects = self._discover(root, profile)
        except SearchDirectoryNotFoundError as e:
            logger.error("%s", e)
            outcome.error = str(e)
            outcome.freed_display = accountant.format_kb(0)
            self._advance(RunState.DONE, outcome)
            return outcome

        self._advance(RunState.CLEANING, outcome)
        for project in projects:
            if self._should_cancel is not None and self._should_cancel():
                logger.info("Cleanup cancelled after %d project(s)", outcome.projects_scanned)
                outcome.cancelled = True
                break

            logger.info("Cleaning %s", project.root_path)
            project_outcome = self._cleaner.clean(project, profile, dry_run)

            outcome.projects_scanned += 1
            if project_outcome.cleaned:
                outcome.projects_cleaned += 1
            outcome.failures.extend(project_outcome.failures)
            outcome.projects.append(project_outcome)

            if self._on_project is not None:
                self._on_project(project_outcome)

        self._advance(RunState.AGGREGATING, outcome)
        if profile.global_post_action is not None and not outcome.cancelled:
            result = run_external(profile.global_post_action, dry_run=dry_run)
            if result.failed:
                outcome.failures.append(
                    Failure(path=result.path, reason=result.error or "Unknown error")
                )

        if dry_run:
            outcome.bytes_freed = 0
            outcome.freed_display = accountant.format_kb(0)
        else:
            freed_kb = accountant.delta(before, accountant.snapshot())
            outcome.bytes_freed = freed_kb * 1024 if freed_kb is not None else 0
            outcome.freed_display = accountant.format_kb(freed_kb)

        self._advance(RunState.DONE, outcome)
        logger.info(
            "Scanned %d project(s), cleaned %d, %d failure(s), freed %s",
            outcome.projects_scanned,
            outcome.projects_cleaned,
            len(outcome.failures),
            outcome.freed_display,
        )
        return outcome

    @staticmethod
    def _discover(root: Path, profile: ToolchainProfile) -> Iterator[ProjectRef]:
        if profile.manifest_pattern is None:
            if not root.is_dir():
                raise SearchDirectoryNotFoundError(str(root))
            logger.debug("Global profile %s, cleaning %s", profile.name, root)
            return iter([ProjectRef(root_path=root, manifest_file=None)])

        scanner = ProjectScanner(skip_dirs=profile.skip_dirs)
        return scanner.scan(root, profile.manifest_pattern)
