"""External tool operations package for syncpick.

This package wraps the command-line tools the backup workflow delegates to:
RsyncEngine mirrors folders, FzfFinder provides fuzzy multi-selection, and
require_commands checks that mandatory tools are installed.

Example:
    >>> from syncpick.operations import RsyncEngine, require_commands
    >>> require_commands(["rsync"])
    >>> with open("backup.log", "a") as log:
    ...     status = RsyncEngine().sync("/home/me/docs", Path("/backup/docs"), log)
"""

from .capabilities import find_command, is_available, require_commands
from .fuzzy_finder import FzfFinder
from .rsync_engine import RsyncEngine

__all__ = [
    "find_command",
    "is_available",
    "require_commands",
    "FzfFinder",
    "RsyncEngine",
]
