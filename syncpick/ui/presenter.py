"""Toolkit-independent interface between the workflow and the screen.

Every interactive call that can be cancelled returns a DialogResult, and the
workflow branches on `result.is_cancelled` instead of inspecting toolkit exit
codes. Progress is reported through a plain callback.

Example:
    result = presenter.menu("Main menu", "Choose an action:", [("1", "Browse")])
    if result.is_cancelled:
        ...
    else:
        handle(result.value)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import (
    Callable,
    ContextManager,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
)

T = TypeVar("T")

# on_progress(current, total, label)
ProgressCallback = Callable[[int, int, str], None]

# (tag, label) pairs for menus and checklists
Choice = Tuple[str, str]


@dataclass(frozen=True)
class DialogResult(Generic[T]):
    """Outcome of a prompt: either a confirmed value or a cancellation."""
    value: Optional[T] = None
    is_cancelled: bool = False

    @classmethod
    def confirmed(cls, value: T) -> "DialogResult[T]":
        return cls(value=value, is_cancelled=False)

    @classmethod
    def cancelled(cls) -> "DialogResult[T]":
        return cls(value=None, is_cancelled=True)


class Presenter(Protocol):
    """Operations the backup workflow needs from a terminal UI toolkit."""

    def message(self, text: str, title: str = "") -> None:
        """Show an informational message and wait for acknowledgement."""

    def yes_no(self, question: str, title: str = "") -> bool:
        """Ask a yes/no question. Cancelling counts as "no"."""

    def menu(
        self,
        title: str,
        text: str,
        choices: Sequence[Choice],
        cancel_label: str = "Exit",
    ) -> DialogResult[str]:
        """Let the operator pick one tag from `choices`."""

    def input_text(self, title: str, prompt: str, default: str = "") -> DialogResult[str]:
        """Ask for a line of text, pre-filled with `default`."""

    def checklist(self, title: str, text: str, items: Sequence[Choice]) -> DialogResult[List[str]]:
        """Let the operator tick any number of items (all start unchecked).

        The confirmed value holds the tags of the ticked items in display order.
        """

    def show_text(self, title: str, text: str) -> None:
        """Show a read-only, scrollable block of text."""

    def show_file(self, title: str, path: Path) -> None:
        """Show the contents of a text file."""

    def choose_directory(self, title: str, start: Path) -> DialogResult[str]:
        """Let the operator pick a directory, starting the browser at `start`.

        The confirmed value is the path as entered; it is not validated.
        """

    def progress(self, title: str, total: int) -> ContextManager[ProgressCallback]:
        """Display a progress gauge for the duration of the context.

        The context yields a callback taking (current, total, label).
        """
