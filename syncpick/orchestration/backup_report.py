"""BackupReport for writing the human-readable summary of a backup run.

This module provides the BackupReport class, which owns the two artifacts of
a run: the summary file it writes itself and the raw log file whose path it
hands to the sync engine. Both live under the destination and share one
timestamp suffix.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, TextIO

from syncpick.models import TransferRecord


class BackupReport:
    """Writer for the backup summary file.

    Every line is flushed as soon as it is written so the summary stays
    useful if the run is interrupted.

    Usage:
        with BackupReport(destination) as report:
            report.log_header(sources)
            for record in records:
                report.log_transfer(record)
            report.log_completion()

    Attributes:
        SEPARATOR: The separator line written under the title.
        TIMESTAMP_FORMAT: strftime format of the file name suffix.
    """

    SEPARATOR = "=" * 33
    TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
    LOG_PREFIX = "backup_"
    SUMMARY_PREFIX = "backup_summary_"

    def __init__(self, destination: Path, started_at: Optional[datetime] = None) -> None:
        """Initialize the report for a run into `destination`.

        Args:
            destination: Validated destination directory.
            started_at: Run start time; defaults to now.

        Raises:
            OSError: If the destination is not a writable directory.
        """
        self._destination = Path(destination)
        self._started_at = started_at or datetime.now()
        self._timestamp = self._started_at.strftime(self.TIMESTAMP_FORMAT)
        self._file_handle: Optional[TextIO] = None
        self._finished_at: Optional[datetime] = None

        self._log_path = self._destination / f"{self.LOG_PREFIX}{self._timestamp}.log"
        self._summary_path = self._destination / f"{self.SUMMARY_PREFIX}{self._timestamp}.txt"

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the destination exists and is a directory.

        Raises:
            OSError: If the destination doesn't exist or is not a directory.
        """
        if not self._destination.exists():
            raise OSError(f"Destination does not exist: {self._destination}")
        if not self._destination.is_dir():
            raise OSError(f"Destination is not a directory: {self._destination}")

    def __enter__(self) -> "BackupReport":
        """Open the summary file for writing.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._summary_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open summary file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the summary file even if an exception occurred."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing summary file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    @property
    def timestamp(self) -> str:
        return self._timestamp

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def finished_at(self) -> Optional[datetime]:
        return self._finished_at

    @property
    def log_path(self) -> Path:
        return self._log_path

    @property
    def summary_path(self) -> Path:
        return self._summary_path

    def log_header(self, sources: Iterable[str]) -> None:
        """Write the title, destination and the list of folders to back up."""
        source_list = list(sources)
        self._write_line(f"BACKUP SUMMARY - {self._format_timestamp(self._started_at)}")
        self._write_line(self.SEPARATOR)
        self._write_line("")
        self._write_line(f"Destination: {self._destination}")
        self._write_line(f"Total folders: {len(source_list)}")
        self._write_line("")
        self._write_line("Included folders:")
        for source in source_list:
            self._write_line(f"- {source}", indent=2)
        self._write_line("")
        self._write_line(f"Detailed log: {self._log_path}")
        self._write_line("")

    def log_transfer(self, record: TransferRecord) -> None:
        """Append the outcome line of one folder."""
        if record.succeeded:
            self._write_line(f"[OK] Success: {record.source} -> {record.destination}")
        else:
            self._write_line(
                f"[FAILED] Error: {record.source} -> {record.destination} "
                f"(exit status {record.return_code})"
            )

    def log_completion(self, finished_at: Optional[datetime] = None) -> None:
        """Append the completion timestamp."""
        self._finished_at = finished_at or datetime.now()
        self._write_line("")
        self._write_line(f"Backup finished at: {self._format_timestamp(self._finished_at)}")

    def _format_timestamp(self, dt: datetime) -> str:
        """Format a datetime as 'YYYY-MM-DD HH:MM:SS'."""
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the summary file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed summary file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
            self._file_handle.flush()
        except OSError as e:
            print(f"Warning: Error writing to summary file: {e}", file=sys.stderr)
