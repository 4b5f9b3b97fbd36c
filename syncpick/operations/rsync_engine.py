"""
rsync invocation for the interactive backup tool.

This module contains the RsyncEngine class, which mirrors one source folder
into one destination folder and appends everything rsync prints to the run's
raw log file.
"""

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from syncpick.models import BackupSettings

# Configure module logger
logger = logging.getLogger(__name__)


class RsyncEngine:
    """
    Runs rsync in archive mode with mirrored deletes.

    The contents of the source folder are synchronized into the destination
    folder (trailing separators on both operands), files matching the
    configured exclude patterns are skipped, and files that no longer exist
    in the source are removed from the destination.
    """

    COMMAND = "rsync"

    # Exit status reported when rsync cannot be started at all
    LAUNCH_FAILED = 127

    def __init__(
        self,
        settings: Optional[BackupSettings] = None,
        executable: Optional[str] = None,
    ) -> None:
        """
        Create an engine.

        Parameters:
            settings (BackupSettings): Supplies the rsync flags and exclude patterns.
            executable (str): Command to run instead of the `rsync` found on PATH.
        """
        self.settings = settings or BackupSettings()
        self.executable = executable or self.COMMAND

    def build_command(self, source: str, destination: Path) -> List[str]:
        """
        Build the rsync argument list for one folder.

        Parameters:
            source (str): Folder whose contents are copied.
            destination (Path): Folder that receives the mirror.

        Returns:
            list[str]: Arguments suitable for subprocess.run.
        """
        command = [self.executable, *self.settings.rsync_flags]
        command.extend(f"--exclude={pattern}" for pattern in self.settings.exclude_patterns)
        command.append(self._with_trailing_separator(source))
        command.append(self._with_trailing_separator(str(destination)))
        return command

    def sync(self, source: str, destination: Path, log_file: TextIO) -> int:
        """
        Mirror `source` into `destination`, appending rsync output to `log_file`.

        A banner naming both folders is written before rsync starts so the raw
        log can be split per folder. Failures are reported through the return
        value only; the caller decides what a non-zero status means.

        Parameters:
            source (str): Folder to copy.
            destination (Path): Target folder, created by rsync when missing.
            log_file (TextIO): Open text file receiving stdout and stderr.

        Returns:
            int: rsync exit status, or LAUNCH_FAILED if rsync could not be started.
        """
        command = self.build_command(source, destination)
        started = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_file.write(f"[{started}] {source} -> {destination}\n")
        log_file.write("$ " + " ".join(command) + "\n")
        # rsync writes to the same descriptor; our buffer must be empty first
        log_file.flush()

        logger.debug("Running %s", command)
        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=log_file,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as e:
            logger.error("Cannot start %s: %s", self.executable, e)
            log_file.write(f"Cannot start {self.executable}: {e}\n")
            log_file.flush()
            return self.LAUNCH_FAILED

        if completed.returncode != 0:
            logger.warning(
                "%s exited with status %d for %s", self.executable, completed.returncode, source
            )
        return completed.returncode

    @staticmethod
    def _with_trailing_separator(path: str) -> str:
        stripped = path.rstrip(os.sep)
        return stripped + os.sep if stripped else os.sep
