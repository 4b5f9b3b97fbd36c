"""syncpick - Interactive Folder Backup.

A Python application for selecting several folders through menus, fuzzy
search and checklists, and backing them up into one destination with rsync.
"""

__version__ = "1.0.0"

from .models import (
    BackupSettings,
    RunResult,
    TransferOutcome,
    TransferRecord,
)

__all__ = [
    "__version__",
    "BackupSettings",
    "RunResult",
    "TransferOutcome",
    "TransferRecord",
]


def main() -> None:
    """Entry point for the syncpick CLI application.

    This function is called when the `syncpick` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the syncpick.cli module.
    """
    from syncpick.cli import app
    app()
