"""
Exceptions raised by the interactive backup workflow.

Recoverable errors (invalid picks, bad destinations) are caught by the
component that prompted for the value, shown to the operator and followed by
a new prompt. Only MissingCapabilityError and UserCancelledError are meant to
reach the CLI.
"""

from pathlib import Path
from typing import Union


class SyncpickError(Exception):
    """Base class for all syncpick errors."""


class MissingCapabilityError(SyncpickError):
    """A required external command is not available on PATH."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"command '{tool}' not found.")


class InvalidPathError(SyncpickError):
    """A picked path does not exist or is not a directory."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"Invalid folder: {self.path}")


class DuplicateSelectionError(SyncpickError):
    """The path is already part of the selection."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Folder already selected: {path}")


class DestinationError(SyncpickError):
    """Base class for destination validation failures."""


class DestinationEmptyError(DestinationError):
    def __init__(self) -> None:
        super().__init__("Destination directory cannot be empty.")


class DestinationNotWritableError(DestinationError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No write permission in '{path}'.")


class DestinationCreateFailedError(DestinationError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        super().__init__("Failed to create directory. Check the permissions.")


class UserCancelledError(SyncpickError):
    """The operator chose to leave the program.

    Attributes:
        exit_code: Process exit status the CLI should use (0 for a plain
            exit from the selection menu, 2 for an aborted backup).
    """

    def __init__(self, message: str = "Cancelled by user.", exit_code: int = 2) -> None:
        self.exit_code = exit_code
        super().__init__(message)
