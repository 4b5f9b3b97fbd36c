"""Presenter backed by the `dialog` command-line program.

Each call runs `dialog --stdout`, so the answer arrives on stdout while the
widget is drawn on the terminal. Exit status 0 means OK; 1 (Cancel) and 255
(Esc) are reported as cancellations. Checklists use `--separate-output` so the
ticked tags come back one per line.
"""

import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from syncpick.ui.presenter import Choice, DialogResult, ProgressCallback

logger = logging.getLogger(__name__)


class DialogPresenter:
    """Drives `dialog` widgets through subprocess calls."""

    COMMAND = "dialog"

    def __init__(self, executable: Optional[str] = None, backtitle: str = "Interactive Backup") -> None:
        self.executable = executable or self.COMMAND
        self.backtitle = backtitle

    def message(self, text: str, title: str = "") -> None:
        self._run(self._title_args(title) + ["--msgbox", text, "0", "0"])

    def yes_no(self, question: str, title: str = "") -> bool:
        code, _ = self._run(
            self._title_args(title)
            + ["--yes-label", "Yes", "--no-label", "No", "--yesno", question, "0", "0"]
        )
        return code == 0

    def menu(
        self,
        title: str,
        text: str,
        choices: Sequence[Choice],
        cancel_label: str = "Exit",
    ) -> DialogResult[str]:
        args = self._title_args(title) + [
            "--cancel-label",
            cancel_label,
            "--menu",
            text,
            "18",
            "70",
            str(len(choices)),
        ]
        for tag, label in choices:
            args.extend([tag, label])

        code, output = self._run(args)
        if code != 0:
            return DialogResult.cancelled()
        return DialogResult.confirmed(output.strip())

    def input_text(self, title: str, prompt: str, default: str = "") -> DialogResult[str]:
        code, output = self._run(
            self._title_args(title)
            + ["--cancel-label", "Cancel", "--inputbox", prompt, "8", "60", default]
        )
        if code != 0:
            return DialogResult.cancelled()
        return DialogResult.confirmed(output.rstrip("\n"))

    def checklist(self, title: str, text: str, items: Sequence[Choice]) -> DialogResult[List[str]]:
        args = self._title_args(title) + [
            "--separate-output",
            "--checklist",
            text,
            "15",
            "70",
            "10",
        ]
        for tag, label in items:
            args.extend([tag, label, "off"])

        code, output = self._run(args)
        if code != 0:
            return DialogResult.cancelled()
        return DialogResult.confirmed([line for line in output.splitlines() if line])

    def show_text(self, title: str, text: str) -> None:
        # --textbox only reads files; the file lives as long as the widget
        with tempfile.TemporaryDirectory(prefix="syncpick-") as tmpdir:
            path = Path(tmpdir) / "view.txt"
            path.write_text(text, encoding="utf-8")
            self.show_file(title, path)

    def show_file(self, title: str, path: Path) -> None:
        self._run(self._title_args(title) + ["--ok-label", "OK", "--textbox", str(path), "0", "0"])

    def choose_directory(self, title: str, start: Path) -> DialogResult[str]:
        code, output = self._run(
            self._title_args(title)
            + [
                "--ok-label",
                "Select",
                "--cancel-label",
                "Back",
                "--dselect",
                str(start).rstrip(os.sep) + os.sep,
                "15",
                "60",
            ]
        )
        if code != 0:
            return DialogResult.cancelled()
        return DialogResult.confirmed(output.rstrip("\n"))

    @contextmanager
    def progress(self, title: str, total: int) -> Iterator[ProgressCallback]:
        """Feed a `dialog --gauge` through its stdin for the context's duration."""
        process = subprocess.Popen(
            [self.executable, "--backtitle", self.backtitle, "--title", title,
             "--gauge", "Preparing...", "8", "60", "0"],
            stdin=subprocess.PIPE,
            text=True,
        )

        def callback(current: int, total_items: int, label: str) -> None:
            if process.stdin is None or process.stdin.closed:
                return
            percent = current * 100 // total_items if total_items else 100
            try:
                process.stdin.write(f"XXX\n{percent}\n{label}\nXXX\n")
                process.stdin.flush()
            except BrokenPipeError:
                logger.debug("Progress gauge closed early")

        try:
            yield callback
        finally:
            if process.stdin is not None:
                try:
                    process.stdin.close()
                except BrokenPipeError:
                    pass
            process.wait()

    def _title_args(self, title: str) -> List[str]:
        args = ["--backtitle", self.backtitle]
        if title:
            args.extend(["--title", title])
        return args

    def _run(self, args: List[str]) -> Tuple[int, str]:
        """Run dialog with `args`; return its exit status and stdout."""
        command = [self.executable, "--stdout"] + args
        logger.debug("Running %s", command)
        completed = subprocess.run(command, stdout=subprocess.PIPE, text=True, check=False)
        return completed.returncode, completed.stdout or ""
