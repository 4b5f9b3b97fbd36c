"""Workflow orchestration package for syncpick.

This package contains orchestration components for backup runs:
- BackupReport: Timestamped summary file next to the raw rsync log.
- TransferOrchestrator: Sequential per-folder transfer with progress.
- BackupSession: Coordinator of selection, destination, confirmation and transfer.
"""

from syncpick.orchestration.backup_report import BackupReport
from syncpick.orchestration.transfer_orchestrator import TransferOrchestrator
from syncpick.orchestration.backup_session import BackupSession

__all__ = ["BackupReport", "TransferOrchestrator", "BackupSession"]
