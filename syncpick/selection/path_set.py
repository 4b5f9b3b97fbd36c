"""Ordered, duplicate-free collection of selected source folders.

Example:
    >>> from syncpick.selection import PathSet
    >>> paths = PathSet()
    >>> paths.add("/home/me/docs")
    True
    >>> paths.add("/home/me/docs")
    False
    >>> list(paths.list())
    ['/home/me/docs']
"""

from typing import Dict, Iterable, Iterator, Optional

from syncpick.models import DuplicateSelectionError


class PathSet:
    """Selected source folders in insertion order.

    Membership is exact string equality: two spellings of the same folder
    (symlink, relative form) are distinct entries.
    """

    def __init__(self, paths: Optional[Iterable[str]] = None) -> None:
        # dict keys keep insertion order and give O(1) membership
        self._paths: Dict[str, None] = {}
        if paths is not None:
            for path in paths:
                self.add(path)

    def add(self, path: str) -> bool:
        """Append `path` unless already present.

        Returns:
            True if the path was added, False if it was already selected.
        """
        if path in self._paths:
            return False
        self._paths[path] = None
        return True

    def require_new(self, path: str) -> None:
        """Add `path`, raising DuplicateSelectionError if it is already selected."""
        if not self.add(path):
            raise DuplicateSelectionError(path)

    def remove_all(self, paths: Iterable[str]) -> int:
        """Remove every selected path contained in `paths`.

        Returns:
            Number of paths actually removed.
        """
        removed = 0
        for path in set(paths):
            if path in self._paths:
                del self._paths[path]
                removed += 1
        return removed

    def clear(self) -> None:
        self._paths.clear()

    def list(self) -> Iterator[str]:
        """Iterate the current paths in insertion order.

        Each call returns a fresh iterator over a snapshot, so callers may
        mutate the set while consuming it.
        """
        return iter(list(self._paths))

    def count(self) -> int:
        return len(self._paths)

    def last(self) -> Optional[str]:
        """Most recently added path, or None when nothing is selected."""
        if not self._paths:
            return None
        return next(reversed(list(self._paths)))

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return self.list()

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"PathSet({list(self._paths)!r})"
