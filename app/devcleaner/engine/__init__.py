"""Project-discovery cleanup engine.

This module provides project discovery, per-project cleanup with
failure isolation, single-path removal with dry-run support, and
free-space accounting.
"""

from devcleaner.engine.cleaner import ProjectCleaner, working_directory
from devcleaner.engine.elevation import ElevationToken, acquire_elevation
from devcleaner.engine.errors import CleanupError, ElevationError, SearchDirectoryNotFoundError
from devcleaner.engine.external import run_external
from devcleaner.engine.models import (
    CleanupOutcome,
    Failure,
    ProjectCleanOutcome,
    ProjectRef,
    RemovalResult,
    RunState,
)
from devcleaner.engine.remover import PathRemover, expand_target
from devcleaner.engine.run import CleanupRun
from devcleaner.engine.scanner import ProjectScanner
from devcleaner.engine.space import SpaceAccountant

__all__ = [
    "CleanupError",
    "CleanupOutcome",
    "CleanupRun",
    "ElevationError",
    "ElevationToken",
    "Failure",
    "PathRemover",
    "ProjectCleanOutcome",
    "ProjectCleaner",
    "ProjectRef",
    "ProjectScanner",
    "RemovalResult",
    "RunState",
    "SearchDirectoryNotFoundError",
    "SpaceAccountant",
    "acquire_elevation",
    "expand_target",
    "run_external",
    "working_directory",
]
