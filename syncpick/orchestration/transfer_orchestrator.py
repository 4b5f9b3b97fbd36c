"""TransferOrchestrator for running a multi-folder backup.

This module provides the TransferOrchestrator class, which mirrors every
selected folder into the destination one after another, records the outcome
of each folder in the summary report and reports progress through a callback.

Example:
    from pathlib import Path
    from syncpick.orchestration import TransferOrchestrator

    orchestrator = TransferOrchestrator()
    result = orchestrator.run(["/home/me/docs"], Path("/backup"))
    print(result.succeeded, result.failed)
"""

import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from syncpick.models import BackupSettings, RunResult, TransferOutcome, TransferRecord
from syncpick.operations import RsyncEngine
from syncpick.orchestration.backup_report import BackupReport
from syncpick.ui.presenter import ProgressCallback

logger = logging.getLogger(__name__)


class TransferOrchestrator:
    """Runs the sync engine over an ordered selection of folders.

    A failed folder never stops the run: every folder is attempted, its
    outcome is written to the summary, and the detailed cause can only be
    found in the raw log. Failed folders are not retried.

    Attributes:
        engine: Sync engine used for every folder.
        settings: Supplies the pause between folders.
    """

    # Exit status recorded when a folder fails before the engine reports one
    INTERNAL_FAILURE = 1

    def __init__(
        self,
        engine: Optional[RsyncEngine] = None,
        settings: Optional[BackupSettings] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the TransferOrchestrator.

        Args:
            engine: Sync engine; defaults to an RsyncEngine using `settings`.
            settings: Backup settings; defaults to BackupSettings().
            sleep: Function used for the pause between folders.
        """
        self.settings = settings or BackupSettings()
        self.engine = engine or RsyncEngine(self.settings)
        self._sleep = sleep

    def run(
        self,
        sources: Iterable[str],
        destination: Path,
        on_progress: Optional[ProgressCallback] = None,
        started_at: Optional[datetime] = None,
    ) -> RunResult:
        """Back up every source folder into `destination`.

        Args:
            sources: Folders in selection order.
            destination: Validated, writable destination directory.
            on_progress: Called after each folder with
                (current index, total, label).
            started_at: Run start time; defaults to now. Determines the
                timestamp suffix of both artifacts.

        Returns:
            RunResult with one TransferRecord per source, in order.

        Raises:
            OSError: If the summary or log file cannot be created.
        """
        source_list = list(sources)
        total = len(source_list)

        with BackupReport(destination, started_at) as report:
            report.log_header(source_list)

            result = RunResult(
                timestamp=report.timestamp,
                destination=Path(destination),
                log_path=report.log_path,
                summary_path=report.summary_path,
                started_at=report.started_at,
            )

            logger.info("Starting backup of %d folders into %s", total, destination)

            with open(report.log_path, "a", encoding="utf-8") as log_file:
                for index, source in enumerate(source_list, start=1):
                    name = os.path.basename(source.rstrip(os.sep))
                    target = Path(destination) / name

                    record = self._transfer(source, target, log_file)
                    result.records.append(record)
                    report.log_transfer(record)

                    if on_progress is not None:
                        on_progress(index, total, f"Backed up {name} ({index}/{total})")

                    if self.settings.pause_seconds > 0:
                        self._sleep(self.settings.pause_seconds)

            report.log_completion()
            result.finished_at = report.finished_at

        logger.info(
            "Backup finished: %d succeeded, %d failed", result.succeeded, result.failed
        )
        return result

    def _transfer(self, source: str, target: Path, log_file) -> TransferRecord:
        """Run the engine for one folder and turn its status into a record."""
        try:
            return_code = self.engine.sync(source, target, log_file)
        except OSError as e:
            # Writing to the log failed; the folder counts as failed, the run goes on
            logger.error("Backup of %s failed: %s", source, e)
            return_code = self.INTERNAL_FAILURE

        outcome = TransferOutcome.SUCCESS if return_code == 0 else TransferOutcome.FAILURE
        return TransferRecord(
            source=source,
            destination=target,
            outcome=outcome,
            return_code=return_code,
        )
