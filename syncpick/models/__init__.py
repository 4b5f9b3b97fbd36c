"""
Models package for the interactive folder backup tool.

This package provides convenient imports for all data models:
- TransferOutcome: Enum for per-folder results
- BackupSettings: Shared defaults
- TransferRecord: Result of one folder sync
- RunResult: Result of a whole backup run
- Exceptions used across the workflow
"""

from .transfer_outcome import TransferOutcome
from .data_models import (
    BackupSettings,
    TransferRecord,
    RunResult,
)
from .errors import (
    SyncpickError,
    MissingCapabilityError,
    InvalidPathError,
    DuplicateSelectionError,
    DestinationError,
    DestinationEmptyError,
    DestinationNotWritableError,
    DestinationCreateFailedError,
    UserCancelledError,
)

__all__ = [
    "TransferOutcome",
    "BackupSettings",
    "TransferRecord",
    "RunResult",
    "SyncpickError",
    "MissingCapabilityError",
    "InvalidPathError",
    "DuplicateSelectionError",
    "DestinationError",
    "DestinationEmptyError",
    "DestinationNotWritableError",
    "DestinationCreateFailedError",
    "UserCancelledError",
]
