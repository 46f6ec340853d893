"""Elevated-privilege capability.

Removals that need root go through ``sudo``. Instead of keeping a sudo
session alive for the whole process, a run acquires an ElevationToken
once and passes it explicitly to every removal that needs it.
"""

import logging
import os
from dataclasses import dataclass

from devcleaner.engine.errors import ElevationError
from devcleaner.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ElevationToken:
    """Proof that elevated commands may be run.

    Attributes:
        prefix: Command prefix for elevated commands, ``("sudo",)`` or
            empty when the process already runs as root.
    """

    prefix: tuple[str, ...] = ("sudo",)

    def wrap(self, args: list[str]) -> list[str]:
        """Prefix a command so it runs with elevated privileges."""
        return [*self.prefix, *args]


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def acquire_elevation() -> ElevationToken:
    """Acquire elevated privileges for the current run.

    Validates (and caches) sudo credentials with ``sudo -v``, prompting
    for a password on the terminal if necessary.

    Returns:
        An ElevationToken to pass to removals that require elevation.

    Raises:
        ElevationError: If sudo is unavailable or refuses.
    """
    if _is_root():
        logger.debug("Already running as root; no sudo prefix needed")
        return ElevationToken(prefix=())

    if not command_exists("sudo"):
        raise ElevationError("sudo is not available on this system")

    try:
        returncode = run_interactive(["sudo", "-v"])
    except OSError as e:
        raise ElevationError(f"Failed to run sudo: {e}") from e

    if returncode != 0:
        raise ElevationError(f"sudo refused elevation (exit code {returncode})")

    logger.info("Acquired elevated privileges via sudo")
    return ElevationToken()
