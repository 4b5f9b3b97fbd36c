"""Menu-driven selection of the folders to back up.

This module provides the SelectionWorkflow class, which runs the folder
selection menu and fills a PathSet through four acquisition modes:
- Manual navigation with a directory browser
- Fuzzy multi-selection with fzf over the home directory
- Checklist of the subfolders of the most recently added folder
- Checklist removal of already selected folders

Example:
    from syncpick.selection import PathSet, SelectionWorkflow
    from syncpick.ui import RichPresenter

    paths = PathSet()
    SelectionWorkflow(RichPresenter(), paths).run()
    print(paths.count())
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional

from syncpick.models import (
    BackupSettings,
    DuplicateSelectionError,
    InvalidPathError,
    MissingCapabilityError,
    UserCancelledError,
)
from syncpick.operations import FzfFinder
from syncpick.scanning import DirectoryLister
from syncpick.selection.path_set import PathSet
from syncpick.ui.presenter import Choice, Presenter

logger = logging.getLogger(__name__)


class SelectionWorkflow:
    """Runs the selection menu loop against a PathSet.

    The workflow owns no selection state of its own: every mode mutates the
    PathSet passed in, so the caller sees the result once run() returns.

    Args:
        presenter: UI used for every prompt and message.
        paths: Selection to fill.
        settings: Navigation root and fuzzy search depth.
        lister: Directory enumeration helper.
        finder: Fuzzy finder wrapper.

    Raises:
        UserCancelledError: From run(), when the operator confirms leaving
            the program from the menu (exit code 0).
    """

    NAVIGATE = "1"
    FUZZY = "2"
    SUBFOLDERS = "3"
    REMOVE = "4"
    VIEW = "5"
    CLEAR = "6"
    PROCEED = "7"

    FZF_MISSING = "fzf is not installed. Install it with: apt install fzf"

    MENU_CHOICES: List[Choice] = [
        (NAVIGATE, "Browse and select a folder"),
        (FUZZY, "Fuzzy search (fzf)"),
        (SUBFOLDERS, "Add subfolders"),
        (REMOVE, "Remove selected folders"),
        (VIEW, "View selected folders"),
        (CLEAR, "Clear all selections"),
        (PROCEED, "Proceed to backup"),
    ]

    def __init__(
        self,
        presenter: Presenter,
        paths: PathSet,
        settings: Optional[BackupSettings] = None,
        lister: Optional[DirectoryLister] = None,
        finder: Optional[FzfFinder] = None,
    ) -> None:
        self.presenter = presenter
        self.paths = paths
        self.settings = settings or BackupSettings()
        self.lister = lister or DirectoryLister()
        self.finder = finder or FzfFinder()

    def run(self) -> None:
        """Loop over the selection menu until the operator proceeds.

        Returns only when at least one folder is selected and "Proceed" was
        chosen.
        """
        actions: Dict[str, Callable[[], None]] = {
            self.NAVIGATE: self.navigate,
            self.FUZZY: self.fuzzy_search,
            self.SUBFOLDERS: self.add_subfolders,
            self.REMOVE: self.remove_selected,
            self.VIEW: self.view_selected,
            self.CLEAR: self.clear_all,
        }

        while True:
            status = f"Status: {self.paths.count()} folders selected\n\nChoose an action:"
            result = self.presenter.menu(
                "Folder Selection Menu", status, self.MENU_CHOICES, cancel_label="Exit"
            )

            if result.is_cancelled:
                if self.presenter.yes_no("Do you want to exit the program?"):
                    raise UserCancelledError("Exited from the selection menu.", exit_code=0)
                continue

            if result.value == self.PROCEED:
                if self.paths.count() == 0:
                    self.presenter.message("Select at least one folder before proceeding.")
                    continue
                logger.info("Proceeding with %d selected folders", self.paths.count())
                return

            action = actions.get(result.value or "")
            if action is not None:
                action()

    def navigate(self) -> None:
        """Pick folders one at a time with the directory browser.

        Each accepted folder becomes the starting point of the next pick.
        """
        current = self.settings.home
        while True:
            result = self.presenter.choose_directory("Browse Folders", current)
            if result.is_cancelled:
                return

            try:
                path = self._resolve_pick(result.value or "", current)
                self.paths.require_new(path)
            except (InvalidPathError, DuplicateSelectionError) as e:
                self.presenter.message(str(e))
                continue

            logger.debug("Added %s by navigation", path)
            self.presenter.message(f"Added: {path}")

            if self.presenter.yes_no(f"Show contents of {path}?"):
                self.presenter.show_text(f"Contents: {path}", self.lister.describe(Path(path)))

            if not self.presenter.yes_no("Add more folders?"):
                return

            current = Path(path)

    def fuzzy_search(self) -> None:
        """Add any number of folders picked with fzf below the home directory."""
        if not self.finder.is_available():
            self.presenter.message(self.FZF_MISSING)
            return

        self.lister.clear_errors()
        candidates = self.lister.walk_directories(
            self.settings.home, self.settings.fuzzy_max_depth
        )
        try:
            chosen = self.finder.select(candidates)
        except MissingCapabilityError as e:
            logger.warning("Fuzzy search unavailable: %s", e)
            self.presenter.message(self.FZF_MISSING)
            return
        self._report_listing_errors()
        if not chosen:
            return

        added = self._add_all(chosen)
        self.presenter.message(f"Added {added} folders via fuzzy search.")

    def add_subfolders(self) -> None:
        """Tick subfolders of the most recently added folder (or home)."""
        last = self.paths.last()
        parent = Path(last) if last is not None else self.settings.home

        self.lister.clear_errors()
        subfolders = self.lister.list_subdirectories(parent)
        had_errors = self._report_listing_errors()
        if not subfolders:
            if not had_errors:
                self.presenter.message(f"No subfolders in {parent}.")
            return

        items = [(folder, os.path.basename(folder)) for folder in subfolders]
        result = self.presenter.checklist(
            f"Subfolders of {parent.name or parent}",
            "Mark the subfolders to back up:",
            items,
        )
        if result.is_cancelled or not result.value:
            return

        added = self._add_all(result.value)
        self.presenter.message(f"Added {added} subfolders.")

    def remove_selected(self) -> None:
        """Tick selected folders to drop them from the selection."""
        if self.paths.count() == 0:
            self.presenter.message("No folders to remove.")
            return

        items = [(path, os.path.basename(path) or path) for path in self.paths.list()]
        result = self.presenter.checklist(
            "Remove Folders", "Select the folders to remove:", items
        )
        if result.is_cancelled or not result.value:
            return

        removed = self.paths.remove_all(result.value)
        self.presenter.message(f"Removed {removed} folders.")

    def view_selected(self) -> None:
        """Show the numbered selection and its size."""
        count = self.paths.count()
        if count == 0:
            self.presenter.message("No folders selected.")
            return

        self.presenter.show_text(f"Selected Folders ({count})", format_selection(self.paths))

    def clear_all(self) -> None:
        """Empty the selection after confirmation."""
        if self.presenter.yes_no(f"Clear all {self.paths.count()} selected folders?"):
            self.paths.clear()
            self.presenter.message("All selections were removed.")

    def _report_listing_errors(self) -> bool:
        """Show and clear errors collected by the lister; True if there were any."""
        errors = self.lister.get_errors()
        if not errors:
            return False
        self.lister.clear_errors()
        self.presenter.message("\n".join(errors))
        return True

    def _add_all(self, candidates: List[str]) -> int:
        return sum(1 for candidate in candidates if self.paths.add(candidate))

    def _resolve_pick(self, raw: str, current: Path) -> str:
        """Turn a browser answer into a normalized absolute folder path.

        Raises:
            InvalidPathError: If the result is not an existing directory.
        """
        expanded = os.path.expanduser(raw)
        if not os.path.isabs(expanded):
            expanded = os.path.join(str(current), expanded)
        path = os.path.normpath(expanded)
        if not os.path.isdir(path):
            raise InvalidPathError(raw)
        return path


def format_selection(paths: PathSet) -> str:
    """Numbered listing of the selection with a total line."""
    lines = ["FOLDERS SELECTED FOR BACKUP:", "=" * 33, ""]
    for idx, path in enumerate(paths.list(), start=1):
        lines.append(f"{idx}. {path}")
    lines.append("")
    lines.append(f"Total: {paths.count()} folders")
    return "\n".join(lines)
