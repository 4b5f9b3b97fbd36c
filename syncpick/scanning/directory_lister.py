"""Directory listing utilities used by the selection workflow.

This module provides the DirectoryLister class that enumerates candidate
folders for the subfolder checklist and the fuzzy finder, and renders a long
listing of a folder for the preview screen.

Example:
    >>> from syncpick.scanning import DirectoryLister
    >>> lister = DirectoryLister()
    >>> lister.list_subdirectories(Path("/data"))
    ['/data/alpha', '/data/beta']
"""

import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Iterator, List

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Enumerates directories and collects errors for unreadable entries.

    Traversal never follows symlinks and never raises for permission problems;
    those are recorded and can be read back with get_errors().

    Attributes:
        _errors: List of error messages encountered while listing.
    """

    def __init__(self) -> None:
        self._errors: List[str] = []

    def list_subdirectories(self, parent: Path) -> List[str]:
        """Immediate child directories of `parent`, sorted lexicographically.

        Args:
            parent: Folder whose children are listed.

        Returns:
            Full paths of the child directories. Empty if `parent` cannot be
            read or has no subdirectories.
        """
        result: List[str] = []
        try:
            with os.scandir(parent) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            result.append(os.path.join(str(parent), entry.name))
                    except OSError as e:
                        self._errors.append(f"Error accessing {entry.path}: {e}")
        except PermissionError:
            self._errors.append(f"Permission denied: {parent}")
        except OSError as e:
            self._errors.append(f"Error listing {parent}: {e}")

        result.sort()
        return result

    def walk_directories(self, base: Path, max_depth: int) -> Iterator[str]:
        """Yield `base` and every directory below it up to `max_depth` levels.

        Args:
            base: Root of the walk (depth 0, included in the output).
            max_depth: Deepest level yielded; children of that level are
                not visited.

        Yields:
            Directory paths as strings, parents before children.
        """
        base_str = str(base)
        base_depth = base_str.rstrip(os.sep).count(os.sep)

        def on_error(error: OSError) -> None:
            self._errors.append(f"Error walking {error.filename}: {error.strerror}")

        if not os.path.isdir(base_str):
            self._errors.append(f"Not a directory: {base_str}")
            return

        for dirpath, dirnames, _filenames in os.walk(base_str, onerror=on_error):
            yield dirpath

            depth = dirpath.rstrip(os.sep).count(os.sep) - base_depth
            if depth >= max_depth:
                dirnames[:] = []
                continue

            # Symlinked directories are not directories for this walk
            dirnames[:] = sorted(
                d for d in dirnames if not os.path.islink(os.path.join(dirpath, d))
            )

    def describe(self, folder: Path) -> str:
        """Long listing of `folder`: mode, size, modification time and name.

        Unreadable folders produce an error line instead of raising.
        """
        lines: List[str] = [f"Contents of {folder}", ""]
        try:
            entries = sorted(os.scandir(folder), key=lambda e: e.name)
        except OSError as e:
            logger.debug("Cannot list %s: %s", folder, e)
            lines.append(f"Error listing {folder}")
            return "\n".join(lines)

        for entry in entries:
            try:
                st = entry.stat(follow_symlinks=False)
            except OSError:
                lines.append(f"?????????? {'?':>10} {'?':>16} {entry.name}")
                continue
            modified = datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M")
            name = entry.name + ("/" if stat.S_ISDIR(st.st_mode) else "")
            lines.append(f"{stat.filemode(st.st_mode)} {st.st_size:>10} {modified:>16} {name}")

        lines.append("")
        lines.append(f"Total: {len(entries)} entries")
        return "\n".join(lines)

    def get_errors(self) -> List[str]:
        """Get list of errors encountered during listing operations."""
        return self._errors.copy()

    def clear_errors(self) -> None:
        """Clear the list of accumulated errors."""
        self._errors.clear()
