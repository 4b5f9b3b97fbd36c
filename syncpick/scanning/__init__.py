"""Directory scanning package for syncpick.

This package provides DirectoryLister, which enumerates candidate folders for
the subfolder checklist and the fuzzy finder and renders folder previews.

Example:
    >>> from syncpick.scanning import DirectoryLister
    >>> from pathlib import Path
    >>>
    >>> lister = DirectoryLister()
    >>> children = lister.list_subdirectories(Path.home())
    >>> candidates = list(lister.walk_directories(Path.home(), max_depth=4))
"""

from .directory_lister import DirectoryLister

__all__ = ["DirectoryLister"]
