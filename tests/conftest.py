"""Pytest fixtures for syncpick tests."""

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Generator, Iterator, List, Optional, Sequence, TextIO, Tuple

import pytest

from syncpick.models import BackupSettings
from syncpick.ui.presenter import Choice, DialogResult, ProgressCallback


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "integration: end-to-end workflow tests")


class ScriptedPresenter:
    """Presenter that replays scripted answers and records what was shown.

    Answer lists are consumed front to back; None in menu, input, checklist
    or directory answers means the operator cancelled. Running out of
    answers raises IndexError so a looping workflow fails fast.
    """

    def __init__(self) -> None:
        self.menu_answers: List[Optional[str]] = []
        self.yes_no_answers: List[bool] = []
        self.input_answers: List[Optional[str]] = []
        self.checklist_answers: List[Optional[List[str]]] = []
        self.directory_answers: List[Optional[str]] = []

        self.messages: List[str] = []
        self.questions: List[str] = []
        self.texts: List[Tuple[str, str]] = []
        self.files: List[Tuple[str, Path, Optional[str]]] = []
        self.menu_texts: List[str] = []
        self.checklist_items: List[List[Choice]] = []
        self.directory_starts: List[Path] = []
        self.progress_updates: List[Tuple[int, int, str]] = []

    def message(self, text: str, title: str = "") -> None:
        self.messages.append(text)

    def yes_no(self, question: str, title: str = "") -> bool:
        self.questions.append(question)
        return self.yes_no_answers.pop(0)

    def menu(
        self,
        title: str,
        text: str,
        choices: Sequence[Choice],
        cancel_label: str = "Exit",
    ) -> DialogResult[str]:
        self.menu_texts.append(text)
        return self._result(self.menu_answers.pop(0))

    def input_text(self, title: str, prompt: str, default: str = "") -> DialogResult[str]:
        return self._result(self.input_answers.pop(0))

    def checklist(self, title: str, text: str, items: Sequence[Choice]) -> DialogResult[List[str]]:
        self.checklist_items.append(list(items))
        return self._result(self.checklist_answers.pop(0))

    def show_text(self, title: str, text: str) -> None:
        self.texts.append((title, text))

    def show_file(self, title: str, path: Path) -> None:
        content = path.read_text(encoding="utf-8") if path.exists() else None
        self.files.append((title, path, content))

    def choose_directory(self, title: str, start: Path) -> DialogResult[str]:
        self.directory_starts.append(start)
        return self._result(self.directory_answers.pop(0))

    @contextmanager
    def progress(self, title: str, total: int) -> Iterator[ProgressCallback]:
        def callback(current: int, total_items: int, label: str) -> None:
            self.progress_updates.append((current, total_items, label))

        yield callback

    @staticmethod
    def _result(answer):
        if answer is None:
            return DialogResult.cancelled()
        return DialogResult.confirmed(answer)


class FakeEngine:
    """Sync engine double: records calls and returns scripted exit statuses.

    Args:
        failures: Maps a source path to the exit status to return for it.
    """

    def __init__(self, failures: Optional[Dict[str, int]] = None) -> None:
        self.failures = failures or {}
        self.calls: List[Tuple[str, Path]] = []

    def sync(self, source: str, destination: Path, log_file: TextIO) -> int:
        self.calls.append((source, destination))
        code = self.failures.get(source, 0)
        log_file.write(f"{source} -> {destination}: status {code}\n")
        return code


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def presenter() -> ScriptedPresenter:
    """Return a fresh ScriptedPresenter."""
    return ScriptedPresenter()


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Return a FakeEngine where every folder succeeds."""
    return FakeEngine()


@pytest.fixture
def fake_home(temp_dir: Path) -> Path:
    """Create a home directory tree for navigation tests.

    Creates:
        home/
        ├── docs/
        │   ├── letters/
        │   └── reports/
        ├── music/
        ├── projects/
        │   ├── alpha/
        │   │   └── src/
        │   └── beta/
        └── notes.txt

    Returns:
        Path to the home directory.
    """
    home = temp_dir / "home"
    for folder in (
        "docs/letters",
        "docs/reports",
        "music",
        "projects/alpha/src",
        "projects/beta",
    ):
        (home / folder).mkdir(parents=True)
    (home / "notes.txt").write_text("remember the milk")
    return home


@pytest.fixture
def settings(fake_home: Path) -> BackupSettings:
    """BackupSettings rooted at the fake home directory."""
    return BackupSettings(home=fake_home)


@pytest.fixture
def source_folders(temp_dir: Path) -> List[str]:
    """Create two populated source folders named docs and proj.

    Returns:
        The two folder paths as strings, in order.
    """
    docs = temp_dir / "a" / "docs"
    proj = temp_dir / "a" / "proj"
    docs.mkdir(parents=True)
    proj.mkdir(parents=True)
    (docs / "readme.txt").write_text("docs readme")
    (proj / "main.py").write_text("print('hi')\n")
    return [str(docs), str(proj)]


@pytest.fixture
def backup_dir(temp_dir: Path) -> Path:
    """Create an empty, writable backup destination."""
    destination = temp_dir / "backup"
    destination.mkdir()
    return destination
