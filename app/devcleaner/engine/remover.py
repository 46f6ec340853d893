"""Single-path removal with dry-run preview.

Handles deletion of one file or directory, optionally through sudo,
and converts every failure into a RemovalResult instead of raising.
"""

import glob
import logging
import os
import shutil
from pathlib import Path

from devcleaner.engine.elevation import ElevationToken
from devcleaner.engine.models import RemovalResult
from devcleaner.utils.formatting import format_size
from devcleaner.utils.shell import run_command

logger = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")


def expand_target(root: Path, template: str) -> list[Path]:
    """Resolve a path template against a project root.

    Relative templates are joined to ``root``; ``~`` is expanded. Templates
    containing glob characters expand to the matching paths (possibly
    none); plain templates always yield exactly one path, existing or not.

    Args:
        root: Absolute project root.
        template: Path template from a removal action.

    Returns:
        Concrete paths, sorted.
    """
    expanded = os.path.expanduser(template)
    if not _GLOB_CHARS.intersection(expanded):
        path = Path(expanded)
        return [path if path.is_absolute() else root / path]

    if os.path.isabs(expanded):
        pattern = expanded
    else:
        pattern = os.path.join(glob.escape(str(root)), expanded)
    return [Path(match) for match in sorted(glob.glob(pattern))]


class PathRemover:
    """Removes single paths, or previews their removal in dry-run mode.

    Failures (permission denied, busy files, I/O errors, sudo refusals)
    are returned as ``RemovalResult.error`` and never raised.
    """

    def remove(
        self,
        path: Path | str,
        *,
        recursive: bool = True,
        dry_run: bool = False,
        elevated: bool = False,
        elevation: ElevationToken | None = None,
    ) -> RemovalResult:
        """Remove a file or directory.

        Args:
            path: Absolute path to remove.
            recursive: Remove non-empty directories. If False, only files
                and empty directories can be removed.
            dry_run: Report what would be removed without touching anything.
            elevated: Remove through sudo.
            elevation: Token required for elevated removals.

        Returns:
            RemovalResult describing what happened.
        """
        path_str = str(path)

        if not self._exists(path_str, elevated=elevated, elevation=elevation):
            logger.debug("Nothing to remove at %s", path_str)
            return RemovalResult(path=path_str, attempted=False, dry_run=dry_run)

        if dry_run:
            size = format_size(self._estimate_size(Path(path_str)))
            suffix = " (sudo)" if elevated else ""
            logger.info("Dry-run: would delete%s %s (%s)", suffix, path_str, size)
            return RemovalResult(
                path=path_str,
                attempted=True,
                size_estimate=size,
                dry_run=True,
            )

        if elevated:
            return self._remove_elevated(path_str, recursive=recursive, elevation=elevation)

        return self._remove_local(path_str, recursive=recursive)

    def _exists(
        self,
        path: str,
        *,
        elevated: bool,
        elevation: ElevationToken | None,
    ) -> bool:
        """Check existence, asking sudo for elevated removals.

        Dangling symlinks count as existing so they can be removed.
        """
        if os.path.lexists(path):
            return True
        if not elevated or elevation is None:
            return False
        try:
            return run_command(elevation.wrap(["test", "-e", path])).success
        except OSError:
            return False

    def _remove_local(self, path: str, *, recursive: bool) -> RemovalResult:
        target = Path(path)
        try:
            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                if recursive:
                    shutil.rmtree(path)
                elif any(target.iterdir()):
                    return RemovalResult(
                        path=path,
                        attempted=True,
                        error=f"Directory not empty and recursive removal not requested: {path}",
                    )
                else:
                    target.rmdir()
            else:
                target.unlink()
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return RemovalResult(path=path, attempted=True, error=str(e))

        logger.debug("Deleted %s", path)
        return RemovalResult(path=path, attempted=True, deleted=True)

    def _remove_elevated(
        self,
        path: str,
        *,
        recursive: bool,
        elevation: ElevationToken | None,
    ) -> RemovalResult:
        if elevation is None:
            return RemovalResult(
                path=path,
                attempted=True,
                error="Elevated privileges required (run with --sudo)",
            )

        flags = "-rf" if recursive else "-df"
        try:
            result = run_command(elevation.wrap(["rm", flags, path]))
        except OSError as e:
            return RemovalResult(path=path, attempted=True, error=f"sudo rm failed: {e}")

        if not result.success:
            error = result.stderr.strip() or "sudo rm failed"
            logger.warning("Failed to delete %s with sudo: %s", path, error)
            return RemovalResult(path=path, attempted=True, error=error)

        logger.debug("Deleted %s with sudo", path)
        return RemovalResult(path=path, attempted=True, deleted=True)

    @staticmethod
    def _estimate_size(path: Path) -> int | None:
        """Get size in bytes for a path.

        For files and symlinks, returns the entry size. For directories,
        returns the sum of all files recursively without following
        symlinks. Returns None if the path cannot be measured.
        """
        try:
            if path.is_symlink() or not path.is_dir():
                return path.lstat().st_size

            total = 0
            for dirpath, _dirnames, filenames in os.walk(path):
                for name in filenames:
                    try:
                        total += os.lstat(os.path.join(dirpath, name)).st_size
                    except OSError:
                        continue
            return total
        except OSError:
            return None
