"""Free-space accounting around a cleanup run."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

KB_PER_MB = 1024
KB_PER_GB = 1024 * 1024


class SpaceAccountant:
    """Measures available space on the volume holding ``path``.

    Args:
        path: Any path on the volume to measure. Defaults to the
            current directory.
    """

    def __init__(self, path: Path | str = ".") -> None:
        self._path = Path(path)

    def snapshot(self) -> int | None:
        """Return the bytes available on the volume, or None if unknown."""
        try:
            return shutil.disk_usage(self._path).free
        except OSError as e:
            logger.warning("Cannot determine free space for %s: %s", self._path, e)
            return None

    @staticmethod
    def delta(before: int | None, after: int | None) -> int | None:
        """Return the signed difference ``after - before`` in KB.

        Args:
            before: Free bytes before the run.
            after: Free bytes after the run.

        Returns:
            Signed KB difference, or None if either snapshot is unknown.
        """
        if before is None or after is None:
            return None
        return (after - before) // 1024

    @staticmethod
    def format_kb(kb: int | None) -> str:
        """Format a KB amount in the coarsest sensible unit.

        Shrinking free space (concurrent activity during the run) is
        shown as "0 KB", never as a negative amount.

        Args:
            kb: Kilobytes, or None if unknown.

        Returns:
            "N KB", "N MB" or "N GB" (integer division), or "unknown".
        """
        if kb is None:
            return "unknown"
        if kb <= 0:
            return "0 KB"
        if kb < KB_PER_MB:
            return f"{kb} KB"
        if kb < KB_PER_GB:
            return f"{kb // KB_PER_MB} MB"
        return f"{kb // KB_PER_GB} GB"
