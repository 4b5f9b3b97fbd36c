"""Destination directory validation.

The validator normalizes a typed destination, offers to create it when it is
missing and checks that the current user can write into it. It raises on the
first problem and leaves re-prompting to the caller.

Example:
    >>> from syncpick.destination import DestinationValidator
    >>> validator = DestinationValidator()
    >>> validator.validate("/tmp/", confirm_create=lambda path: True)
    PosixPath('/tmp')
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from syncpick.models import (
    DestinationCreateFailedError,
    DestinationEmptyError,
    DestinationNotWritableError,
)

logger = logging.getLogger(__name__)


class DestinationValidator:
    """Checks a raw destination string and returns a usable directory."""

    @staticmethod
    def normalize(raw_input: str) -> str:
        """Strip exactly one trailing separator.

        The filesystem root keeps its separator.
        """
        value = raw_input
        if len(value) > 1 and value.endswith(os.sep):
            value = value[:-1]
        return value

    def validate(
        self,
        raw_input: str,
        confirm_create: Callable[[Path], bool],
    ) -> Optional[Path]:
        """Validate a destination typed by the operator.

        Args:
            raw_input: Text entered by the operator.
            confirm_create: Called with the missing directory; returns True
                when the operator agrees to create it.

        Returns:
            The normalized, absolute, existing, writable directory, or None when the
            directory is missing and the operator declined to create it.

        Raises:
            DestinationEmptyError: The input is empty after normalization.
            DestinationCreateFailedError: Creating the directory failed.
            DestinationNotWritableError: The directory exists but is not writable.
        """
        value = self.normalize(raw_input)
        if not value:
            raise DestinationEmptyError()

        path = Path(value).expanduser()
        if not path.is_absolute():
            # Anchored to the working directory; symlinks are left as typed
            path = Path.cwd() / path

        if not path.is_dir():
            if not confirm_create(path):
                logger.debug("Creation of %s declined", path)
                return None
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.warning("Cannot create destination %s: %s", path, e)
                raise DestinationCreateFailedError(path, str(e)) from e
            logger.info("Created destination directory %s", path)

        if not os.access(path, os.W_OK):
            raise DestinationNotWritableError(path)

        return path
