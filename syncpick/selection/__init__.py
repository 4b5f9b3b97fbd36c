"""Source folder selection package for syncpick.

This package contains:
- PathSet: Ordered, duplicate-free set of selected folders.
- SelectionWorkflow: Menu loop offering navigation, fuzzy search,
  subfolder checklist, removal, view and clear actions.
"""

from syncpick.selection.path_set import PathSet
from syncpick.selection.selection_workflow import SelectionWorkflow, format_selection

__all__ = ["PathSet", "SelectionWorkflow", "format_selection"]
