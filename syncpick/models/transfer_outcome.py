"""
TransferOutcome enum for per-folder backup results.

Each selected source folder ends a run in exactly one of two states:
1. Success - the sync engine exited with status 0
2. Failure - the sync engine exited with any other status
"""

from enum import Enum


class TransferOutcome(Enum):
    """Encodes the result of synchronizing one source folder."""
    SUCCESS = "success"      # Sync engine exited with status 0
    FAILURE = "failure"      # Non-zero exit status, cause recorded only in the raw log
