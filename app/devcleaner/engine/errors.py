"""Exceptions raised by the cleanup engine.

Per-item problems (missing paths, permission errors, failing tools) are
never raised; they are recorded as data on the run outcome. Only the
conditions below interrupt control flow.
"""


class CleanupError(Exception):
    """Base exception for cleanup engine errors."""


class SearchDirectoryNotFoundError(CleanupError):
    """Raised when the directory to scan for projects does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory not found: {path}")
        self.path = path


class ElevationError(CleanupError):
    """Raised when elevated privileges cannot be acquired."""
