"""BackupSession for sequencing one interactive backup from start to finish.

This module provides the BackupSession class, which owns the selection and
the destination of a session and drives the phases in order:
1. Welcome
2. Source selection (SelectionWorkflow)
3. Destination selection (DestinationValidator, re-prompting on errors)
4. Final confirmation
5. Transfer with progress (TransferOrchestrator), then summary and log views

Example:
    from syncpick.orchestration import BackupSession
    from syncpick.ui import RichPresenter

    session = BackupSession(RichPresenter())
    result = session.run()
"""

import logging
from pathlib import Path
from typing import Optional

from syncpick.destination import DestinationValidator
from syncpick.models import (
    BackupSettings,
    DestinationError,
    RunResult,
    UserCancelledError,
)
from syncpick.operations import FzfFinder
from syncpick.orchestration.transfer_orchestrator import TransferOrchestrator
from syncpick.scanning import DirectoryLister
from syncpick.selection import PathSet, SelectionWorkflow
from syncpick.ui.presenter import Presenter

logger = logging.getLogger(__name__)


class BackupSession:
    """Owns the state of one backup session and runs its phases.

    Attributes:
        presenter: UI used for every prompt.
        settings: Shared backup settings.
        paths: Folders selected so far.
        destination: Validated destination, None until chosen.
    """

    WELCOME = (
        "Welcome to the interactive backup!\n\n"
        "This tool helps you select folders and back them up with rsync."
    )

    def __init__(
        self,
        presenter: Presenter,
        settings: Optional[BackupSettings] = None,
        validator: Optional[DestinationValidator] = None,
        orchestrator: Optional[TransferOrchestrator] = None,
        lister: Optional[DirectoryLister] = None,
        finder: Optional[FzfFinder] = None,
    ) -> None:
        self.presenter = presenter
        self.settings = settings or BackupSettings()
        self.validator = validator or DestinationValidator()
        self.orchestrator = orchestrator or TransferOrchestrator(settings=self.settings)
        self.lister = lister or DirectoryLister()
        self.finder = finder or FzfFinder()

        self.paths = PathSet()
        self.destination: Optional[Path] = None
        self._created_destination = False

    def run(self) -> Optional[RunResult]:
        """Run every phase of the session.

        Returns:
            The RunResult of the transfer, or None if nothing was selected.

        Raises:
            UserCancelledError: If the operator leaves the menu (exit code 0),
                cancels the destination prompt or declines the final
                confirmation (exit code 2).
        """
        self.presenter.message(self.WELCOME, title="Interactive Backup")

        self.select_sources()
        if self.paths.count() == 0:
            self.presenter.message("No folders selected. Exiting...")
            return None

        self.select_destination()

        if not self.confirm():
            self.presenter.message("Backup cancelled by user.")
            raise UserCancelledError("Backup cancelled by user.", exit_code=2)

        return self.perform_backup()

    def select_sources(self) -> None:
        workflow = SelectionWorkflow(
            self.presenter,
            self.paths,
            settings=self.settings,
            lister=self.lister,
            finder=self.finder,
        )
        workflow.run()

    def select_destination(self) -> Path:
        """Prompt until a valid destination is given.

        Raises:
            UserCancelledError: If the operator cancels the prompt and
                confirms abandoning the backup.
        """
        default = str(self.settings.default_destination)
        while True:
            result = self.presenter.input_text(
                "Backup Destination", "Enter the destination directory:", default
            )
            if result.is_cancelled:
                if self.presenter.yes_no("Cancel the backup operation?"):
                    raise UserCancelledError("Backup cancelled by user.", exit_code=2)
                continue

            self._created_destination = False
            try:
                path = self.validator.validate(result.value or "", self._confirm_create)
            except DestinationError as e:
                logger.debug("Destination rejected: %s", e)
                self.presenter.message(str(e))
                continue

            if path is None:
                continue

            if self._created_destination:
                self.presenter.message("Directory created successfully.")

            self.destination = path
            logger.info("Destination set to %s", path)
            return path

    def confirm(self) -> bool:
        """Show sources and destination; return True to start the backup."""
        lines = [
            "BACKUP CONFIRMATION",
            "=" * 20,
            "",
            f"Source folders ({self.paths.count()}):",
        ]
        lines.extend(f"  * {path}" for path in self.paths.list())
        lines.extend(["", f"Destination: {self.destination}"])

        self.presenter.show_text("Confirm Backup", "\n".join(lines))
        return self.presenter.yes_no("Run the backup now?", title="Confirm Backup")

    def perform_backup(self) -> RunResult:
        """Run the transfer under a progress gauge and show its results."""
        if self.destination is None:
            raise ValueError("Destination has not been selected")

        total = self.paths.count()
        with self.presenter.progress("Running Backup", total) as on_progress:
            result = self.orchestrator.run(self.paths.list(), self.destination, on_progress)

        self.presenter.show_file("Backup Complete", result.summary_path)

        if self.presenter.yes_no("Show the detailed log?"):
            self.presenter.show_file("Detailed Log", result.log_path)

        return result

    def _confirm_create(self, path: Path) -> bool:
        accepted = self.presenter.yes_no(f"Directory '{path}' does not exist.\nCreate it?")
        self._created_destination = accepted
        return accepted
