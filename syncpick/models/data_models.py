"""
Core data models for the interactive folder backup tool.

This module contains the following dataclasses:
- BackupSettings: Tunable defaults shared by the workflow components
- TransferRecord: Result of synchronizing one source folder
- RunResult: Everything a finished backup run produced
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .transfer_outcome import TransferOutcome


@dataclass
class BackupSettings:
    """Defaults for navigation, fuzzy search and the sync engine."""
    home: Path = field(default_factory=Path.home)                   # Navigation root and fuzzy-search base
    default_destination_name: str = "backup"                        # Suggested destination under home
    fuzzy_max_depth: int = 4                                        # Directory levels offered to the fuzzy finder
    exclude_patterns: Tuple[str, ...] = (".DS_Store", "*.tmp")      # Globs never copied
    rsync_flags: Tuple[str, ...] = ("-avh", "--delete")             # Archive, verbose, human-readable, mirror deletes
    pause_seconds: float = 0.0                                      # Delay after each folder so progress stays readable

    @property
    def default_destination(self) -> Path:
        return self.home / self.default_destination_name


@dataclass
class TransferRecord:
    """Result of synchronizing a single source folder."""
    source: str                       # Source folder as selected
    destination: Path                 # destination / basename(source)
    outcome: TransferOutcome          # Success or failure
    return_code: int = 0              # Raw sync engine exit status

    @property
    def succeeded(self) -> bool:
        return self.outcome is TransferOutcome.SUCCESS


@dataclass
class RunResult:
    """Summary of a backup run returned by TransferOrchestrator."""
    timestamp: str                    # YYYYMMDD_HHMMSS tag shared by both artifacts
    destination: Path                 # Validated destination directory
    log_path: Path                    # Raw sync engine output
    summary_path: Path                # Human-readable report
    started_at: datetime              # Run start time
    finished_at: Optional[datetime] = None                       # Set once the last folder is done
    records: List[TransferRecord] = field(default_factory=list)  # One per source, in selection order

    @property
    def succeeded(self) -> int:
        return sum(1 for record in self.records if record.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for record in self.records if not record.succeeded)

    @property
    def first_failure_code(self) -> int:
        """Exit status of the first failed folder, or 0 when all succeeded."""
        for record in self.records:
            if not record.succeeded:
                return record.return_code
        return 0
