"""Lookup of the external commands syncpick drives."""

import logging
import shutil
from typing import Iterable, Optional

from syncpick.models import MissingCapabilityError

logger = logging.getLogger(__name__)


def find_command(command: str) -> Optional[str]:
    """Return the full path of `command` on PATH, or None."""
    return shutil.which(command)


def is_available(command: str) -> bool:
    return find_command(command) is not None


def require_commands(commands: Iterable[str]) -> None:
    """Check that every command is installed.

    Raises:
        MissingCapabilityError: For the first command not found on PATH.
    """
    for command in commands:
        location = find_command(command)
        if location is None:
            raise MissingCapabilityError(command)
        logger.debug("Found %s at %s", command, location)
