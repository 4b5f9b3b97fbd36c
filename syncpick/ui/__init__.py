"""User interface package for syncpick.

The workflow talks to the screen through the Presenter protocol. Two
implementations are provided:
- RichPresenter: Rich console prompts, tables and progress bar (default).
- DialogPresenter: widgets of the external `dialog` program.
"""

from .dialog_presenter import DialogPresenter
from .presenter import Choice, DialogResult, Presenter, ProgressCallback
from .rich_presenter import RichPresenter

__all__ = [
    "Choice",
    "DialogResult",
    "DialogPresenter",
    "Presenter",
    "ProgressCallback",
    "RichPresenter",
]
