"""Cleanup engine data models.

Defines the records produced while discovering and cleaning projects:
discovered project roots, per-path removal results, per-project
outcomes and the aggregate outcome of a whole run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RunState(str, Enum):
    """Lifecycle of a cleanup run. Transitions only move forward.

    Attributes:
        IDLE: Run created, nothing done yet.
        SCANNING: Validating the search directory and starting the walk.
        CLEANING: Processing discovered projects.
        AGGREGATING: Running the global post action and measuring space.
        DONE: Outcome is final.
    """

    IDLE = "idle"
    SCANNING = "scanning"
    CLEANING = "cleaning"
    AGGREGATING = "aggregating"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class ProjectRef:
    """A project root discovered by the scanner.

    Attributes:
        root_path: Absolute path of the project directory.
        manifest_file: The manifest file that identified the project, or
            None for the home directory cleaned by a global profile.
    """

    root_path: Path
    manifest_file: Path | None


@dataclass(frozen=True, slots=True)
class Failure:
    """A recorded, non-fatal failure.

    Attributes:
        path: Path (or command) that failed.
        reason: Human-readable reason.
    """

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing (or previewing the removal of) a single path.

    Attributes:
        path: Absolute path that was operated on.
        attempted: False when the path did not exist (nothing to do).
        deleted: True only when the path was actually removed (or the
            external command completed successfully).
        size_estimate: Human-readable size (dry-run only).
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a preview.
    """

    path: str
    attempted: bool
    deleted: bool = False
    size_estimate: str | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the removal was attempted and failed."""
        return self.error is not None


@dataclass(slots=True)
class ProjectCleanOutcome:
    """Outcome of applying a profile's actions to one project.

    Attributes:
        project: The cleaned project.
        results: Per-path and per-command results in execution order.
        actions_attempted: Actions that found something to do.
        actions_failed: Attempted actions with at least one error.
        actions_skipped: Actions whose precondition did not hold.
        failures: Failures recorded for this project.
    """

    project: ProjectRef
    results: list[RemovalResult] = field(default_factory=list)
    actions_attempted: int = 0
    actions_failed: int = 0
    actions_skipped: int = 0
    failures: list[Failure] = field(default_factory=list)

    @property
    def actions_succeeded(self) -> int:
        """Number of attempted actions that completed without error."""
        return self.actions_attempted - self.actions_failed

    @property
    def cleaned(self) -> bool:
        """Whether the project counts as cleaned.

        A project is cleaned when at least one action succeeded, or when
        there was nothing eligible to do.
        """
        return self.actions_succeeded > 0 or self.actions_attempted == 0


@dataclass(slots=True)
class CleanupOutcome:
    """Aggregate result of one cleanup run.

    Attributes:
        profile: Name of the toolchain profile used.
        search_dir: Directory that was scanned.
        dry_run: Whether the run was a preview.
        state: Final lifecycle state.
        projects_scanned: Projects discovered and processed.
        projects_cleaned: Projects counted as cleaned.
        failures: All failures in the order they occurred.
        bytes_freed: Free-space gain in bytes (always 0 for dry-runs).
        freed_display: Formatted free-space gain ("unknown" if unmeasurable).
        error: Run-level error (e.g. missing search directory).
        cancelled: Whether the run stopped early on request.
        projects: Per-project outcomes.
    """

    profile: str
    search_dir: str
    dry_run: bool = False
    state: RunState = RunState.IDLE
    projects_scanned: int = 0
    projects_cleaned: int = 0
    failures: list[Failure] = field(default_factory=list)
    bytes_freed: int = 0
    freed_display: str = "0 KB"
    error: str | None = None
    cancelled: bool = False
    projects: list[ProjectCleanOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if the run finished without errors or failures."""
        return self.error is None and not self.failures
