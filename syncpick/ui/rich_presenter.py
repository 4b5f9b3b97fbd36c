"""Rich-based presenter for the interactive backup workflow.

This module provides the RichPresenter class, which renders menus,
checklists, text views and the transfer progress bar with Rich and reads
answers with Rich prompts. Entering "q" at a menu, checklist or folder
prompt goes back; end-of-input (Ctrl-D) cancels any prompt.

Example:
    from syncpick.ui import RichPresenter

    presenter = RichPresenter()
    result = presenter.menu("Folder selection", "Choose an action:", [("1", "Browse")])
    if not result.is_cancelled:
        print(result.value)
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
)
from rich.prompt import Confirm, Prompt
from rich.table import Table

from syncpick.scanning import DirectoryLister
from syncpick.ui.presenter import Choice, DialogResult, ProgressCallback


class RichPresenter:
    """Rich-based terminal presenter.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).
        lister: Optional DirectoryLister used by the folder browser.

    Attributes:
        console: The Rich Console instance used for all output.
    """

    BACK = "q"

    def __init__(
        self,
        console: Optional[Console] = None,
        lister: Optional[DirectoryLister] = None,
    ) -> None:
        self.console = console or Console()
        self._lister = lister or DirectoryLister()

    def message(self, text: str, title: str = "") -> None:
        """Print `text` in a panel."""
        self.console.print(Panel(text, title=title or None, border_style="blue"))

    def yes_no(self, question: str, title: str = "") -> bool:
        """Ask a yes/no question; end-of-input counts as "no"."""
        if title:
            self.console.print(f"[bold]{title}[/bold]")
        try:
            return Confirm.ask(question, default=False, console=self.console)
        except EOFError:
            return False

    def menu(
        self,
        title: str,
        text: str,
        choices: Sequence[Choice],
        cancel_label: str = "Exit",
    ) -> DialogResult[str]:
        """Display a numbered menu and read one tag.

        Args:
            title: Panel title.
            text: Text shown above the options.
            choices: (tag, label) pairs.
            cancel_label: Label of the extra "q" entry.

        Returns:
            The chosen tag, or a cancelled result for "q".
        """
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Tag", style="cyan", justify="right", no_wrap=True)
        table.add_column("Action", style="white")
        for tag, label in choices:
            table.add_row(tag, label)
        table.add_row(self.BACK, f"[dim]{cancel_label}[/dim]")

        self.console.print(Panel(text, title=title, border_style="blue"))
        self.console.print(table)

        tags = [tag for tag, _ in choices]
        try:
            answer = Prompt.ask(
                "Choose an action",
                choices=tags + [self.BACK],
                console=self.console,
            )
        except EOFError:
            return DialogResult.cancelled()

        if answer == self.BACK:
            return DialogResult.cancelled()
        return DialogResult.confirmed(answer)

    def input_text(self, title: str, prompt: str, default: str = "") -> DialogResult[str]:
        """Read a line of text; an empty answer keeps `default`."""
        self.console.print(Panel(prompt, title=title, border_style="blue"))
        try:
            answer = Prompt.ask(
                f"{prompt} ('{self.BACK}' to cancel)",
                default=default,
                console=self.console,
            )
        except EOFError:
            return DialogResult.cancelled()

        if answer.strip() == self.BACK:
            return DialogResult.cancelled()
        return DialogResult.confirmed(answer)

    def checklist(self, title: str, text: str, items: Sequence[Choice]) -> DialogResult[List[str]]:
        """Show numbered items and read the numbers to tick.

        Accepts space separated numbers, "all", a blank line (nothing ticked)
        or "q" to go back. Invalid numbers cause a re-prompt.
        """
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="cyan", width=4)
        table.add_column("Name", style="white")
        table.add_column("Path", style="dim")
        for idx, (tag, label) in enumerate(items, start=1):
            table.add_row(str(idx), label, tag)

        self.console.print(Panel(text, border_style="blue"))
        self.console.print(table)

        count = len(items)
        while True:
            try:
                answer = Prompt.ask(
                    f"Numbers to mark (e.g. '1 3' or 'all', '{self.BACK}' to go back)",
                    default="",
                    show_default=False,
                    console=self.console,
                )
            except EOFError:
                return DialogResult.cancelled()

            answer = answer.strip().lower()
            if answer == self.BACK:
                return DialogResult.cancelled()
            if answer == "all":
                return DialogResult.confirmed([tag for tag, _ in items])
            if not answer:
                return DialogResult.confirmed([])

            indices = self._parse_numbers(answer, count)
            if indices is None:
                self.console.print(
                    f"[red]Invalid selection. Please enter numbers (1-{count}), "
                    f"'all' or '{self.BACK}'.[/red]"
                )
                continue
            return DialogResult.confirmed([items[i][0] for i in indices])

    def show_text(self, title: str, text: str) -> None:
        self.console.print(Panel(text, title=title, border_style="green"))

    def show_file(self, title: str, path: Path) -> None:
        """Show a text file, or an error line if it cannot be read."""
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self.message(f"[red]Cannot read {path}: {e}[/red]", title=title)
            return
        self.show_text(title, content)

    def choose_directory(self, title: str, start: Path) -> DialogResult[str]:
        """List the subfolders of `start` and read a number or a path.

        A blank answer picks `start` itself. Relative paths are returned as
        typed; the caller resolves them against `start`.
        """
        self._lister.clear_errors()
        children = self._lister.list_subdirectories(start)
        for error in self._lister.get_errors():
            self.console.print(f"[red]{error}[/red]")
        self._lister.clear_errors()

        table = Table(title=f"{title}: {start}", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="cyan", width=4)
        table.add_column("Folder", style="white")
        for idx, child in enumerate(children, start=1):
            table.add_row(str(idx), Path(child).name)
        if not children:
            table.caption = "No subfolders"
        self.console.print(table)

        try:
            answer = Prompt.ask(
                f"Folder number or path ('{self.BACK}' to go back)",
                default=str(start),
                console=self.console,
            )
        except EOFError:
            return DialogResult.cancelled()

        answer = answer.strip()
        if answer == self.BACK:
            return DialogResult.cancelled()
        if answer.isdigit() and 1 <= int(answer) <= len(children):
            return DialogResult.confirmed(children[int(answer) - 1])
        return DialogResult.confirmed(answer)

    @contextmanager
    def progress(self, title: str, total: int) -> Iterator[ProgressCallback]:
        """Render a progress bar while the context is active.

        Example:
            with presenter.progress("Running backup", total=3) as on_progress:
                on_progress(1, 3, "Backed up docs (1/3)")
        """
        progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
        )
        task_id = progress.add_task(title, total=total)

        def callback(current: int, total_items: int, label: str) -> None:
            progress.update(task_id, completed=current, total=total_items, description=label)

        with progress:
            yield callback

    def _parse_numbers(self, answer: str, count: int) -> Optional[List[int]]:
        """Convert "1 3" into zero-based indices, or None if any part is invalid."""
        indices: List[int] = []
        for part in answer.replace(",", " ").split():
            if not part.isdigit():
                return None
            idx = int(part)
            if idx < 1 or idx > count:
                return None
            if idx - 1 not in indices:
                indices.append(idx - 1)
        return indices
