"""Project discovery.

Walks a directory tree looking for the manifest file that marks a
project root for a toolchain (``pubspec.yaml``, ``*.sln``, ...).
"""

import fnmatch
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from devcleaner.engine.errors import SearchDirectoryNotFoundError
from devcleaner.engine.models import ProjectRef

logger = logging.getLogger(__name__)


class ProjectScanner:
    """Recursively discovers project roots below a search directory.

    Symlinked directories are never followed, so link cycles cannot
    cause infinite traversal. Unreadable directories are skipped.

    Args:
        skip_dirs: Directory names that are never descended into
            (e.g. ``.git``, ``node_modules``).
    """

    def __init__(self, *, skip_dirs: Iterable[str] = ()) -> None:
        self._skip_dirs = frozenset(skip_dirs)

    def scan(self, root_dir: Path | str, manifest_pattern: str) -> Iterator[ProjectRef]:
        """Find every directory containing a file matching ``manifest_pattern``.

        The search directory is validated immediately; the walk itself is
        lazy, so projects can be cleaned while the scan is in progress.
        Each call starts a fresh walk.

        Args:
            root_dir: Directory to search.
            manifest_pattern: File name or fnmatch glob (e.g. "*.sln").

        Returns:
            Iterator of ProjectRef, one per matching directory.

        Raises:
            SearchDirectoryNotFoundError: If root_dir is not a directory.
        """
        root = Path(os.path.abspath(os.path.expanduser(str(root_dir))))
        if not root.is_dir():
            raise SearchDirectoryNotFoundError(str(root))
        return self._walk(root, manifest_pattern)

    def _walk(self, root: Path, manifest_pattern: str) -> Iterator[ProjectRef]:
        for dirpath, dirnames, filenames in os.walk(
            root,
            topdown=True,
            onerror=self._on_walk_error,
            followlinks=False,
        ):
            # Prune in place; sort so discovery order is deterministic
            dirnames[:] = sorted(d for d in dirnames if d not in self._skip_dirs)

            project_dir = Path(dirpath)
            # Dangling links named like a manifest do not mark a project
            manifest = next(
                (
                    project_dir / name
                    for name in sorted(fnmatch.filter(filenames, manifest_pattern))
                    if (project_dir / name).is_file()
                ),
                None,
            )
            if manifest is None:
                continue

            logger.debug("Found project %s (%s)", project_dir, manifest.name)
            yield ProjectRef(root_path=project_dir, manifest_file=manifest)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug("Skipping unreadable path %s: %s", error.filename, error.strerror)
