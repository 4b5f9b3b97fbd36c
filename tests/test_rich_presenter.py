"""Tests for the RichPresenter class."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from syncpick.ui import RichPresenter

CHOICES = [("1", "Browse"), ("2", "Fuzzy search")]
ITEMS = [("/data/a", "a"), ("/data/b", "b"), ("/data/c", "c")]


@pytest.fixture
def presenter_with_output() -> tuple[RichPresenter, io.StringIO]:
    """Create a RichPresenter with captured output.

    Returns:
        Tuple of (RichPresenter instance, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, force_terminal=True, width=120)
    return RichPresenter(console=console), output


class TestRichPresenterDisplay:
    """Tests for output-only methods."""

    def test_message_printed(self, presenter_with_output) -> None:
        """Verify messages appear in a titled panel."""
        presenter, output = presenter_with_output

        presenter.message("Added: /data/a", title="Browse")

        result = output.getvalue()
        assert "Added: /data/a" in result
        assert "Browse" in result

    def test_show_file_reads_content(self, presenter_with_output, temp_dir: Path) -> None:
        """Verify a file's content is shown."""
        presenter, output = presenter_with_output
        path = temp_dir / "summary.txt"
        path.write_text("BACKUP SUMMARY - today")

        presenter.show_file("Backup Complete", path)

        assert "BACKUP SUMMARY - today" in output.getvalue()

    def test_show_missing_file_reports_error(self, presenter_with_output, temp_dir: Path) -> None:
        """Verify an unreadable file gives an error line instead of raising."""
        presenter, output = presenter_with_output

        presenter.show_file("Detailed Log", temp_dir / "missing.log")

        assert "Cannot read" in output.getvalue()

    def test_progress_updates_description(self, presenter_with_output) -> None:
        """Verify the progress callback can be driven to completion."""
        presenter, output = presenter_with_output

        with presenter.progress("Running Backup", total=2) as on_progress:
            on_progress(1, 2, "Backed up a (1/2)")
            on_progress(2, 2, "Backed up b (2/2)")

        assert "Backed up b (2/2)" in output.getvalue()


class TestRichPresenterPrompts:
    """Tests for prompt methods with patched Rich prompts."""

    @patch("syncpick.ui.rich_presenter.Confirm.ask", return_value=True)
    def test_yes_no_true(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output
        assert presenter.yes_no("Add more folders?") is True

    @patch("syncpick.ui.rich_presenter.Confirm.ask", side_effect=EOFError)
    def test_yes_no_eof_is_no(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        """Verify end-of-input answers no."""
        presenter, _ = presenter_with_output
        assert presenter.yes_no("Add more folders?") is False

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="2")
    def test_menu_returns_tag(self, mock_ask: MagicMock, presenter_with_output) -> None:
        """Verify the chosen tag is returned and all tags are offered."""
        presenter, output = presenter_with_output

        result = presenter.menu("Folder Selection Menu", "Choose an action:", CHOICES)

        assert not result.is_cancelled
        assert result.value == "2"
        assert mock_ask.call_args.kwargs["choices"] == ["1", "2", "q"]
        assert "Fuzzy search" in output.getvalue()

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="q")
    def test_menu_back_is_cancel(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, output = presenter_with_output

        result = presenter.menu("Menu", "Choose:", CHOICES, cancel_label="Exit")

        assert result.is_cancelled
        assert "Exit" in output.getvalue()

    @patch("syncpick.ui.rich_presenter.Prompt.ask", side_effect=EOFError)
    def test_menu_eof_is_cancel(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output
        assert presenter.menu("Menu", "Choose:", CHOICES).is_cancelled

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="/srv/backup")
    def test_input_text(self, mock_ask: MagicMock, presenter_with_output) -> None:
        """Verify typed text is returned and the default is offered."""
        presenter, _ = presenter_with_output

        result = presenter.input_text("Backup Destination", "Enter the destination:", "/home/me/backup")

        assert result.value == "/srv/backup"
        assert mock_ask.call_args.kwargs["default"] == "/home/me/backup"

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="q")
    def test_input_text_cancel(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output
        assert presenter.input_text("Dest", "Enter:").is_cancelled

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="")
    def test_input_text_keeps_empty_answer(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        """Verify an empty answer is passed through for the caller to reject."""
        presenter, _ = presenter_with_output

        result = presenter.input_text("Dest", "Enter:")

        assert not result.is_cancelled
        assert result.value == ""


class TestRichPresenterChecklist:
    """Tests for checklist parsing."""

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="1 3")
    def test_numbers_select_tags(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output

        result = presenter.checklist("Remove Folders", "Select:", ITEMS)

        assert result.value == ["/data/a", "/data/c"]

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="all")
    def test_all(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output
        assert presenter.checklist("T", "Select:", ITEMS).value == ["/data/a", "/data/b", "/data/c"]

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="")
    def test_blank_selects_nothing(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output

        result = presenter.checklist("T", "Select:", ITEMS)

        assert not result.is_cancelled
        assert result.value == []

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="q")
    def test_back(self, _mock_ask: MagicMock, presenter_with_output) -> None:
        presenter, _ = presenter_with_output
        assert presenter.checklist("T", "Select:", ITEMS).is_cancelled

    @patch("syncpick.ui.rich_presenter.Prompt.ask", side_effect=["7", "x", "2,2"])
    def test_invalid_input_reprompts(self, mock_ask: MagicMock, presenter_with_output) -> None:
        """Verify out-of-range and non-numeric answers are re-asked."""
        presenter, output = presenter_with_output

        result = presenter.checklist("T", "Select:", ITEMS)

        assert result.value == ["/data/b"]
        assert mock_ask.call_count == 3
        assert "Invalid selection" in output.getvalue()


class TestRichPresenterChooseDirectory:
    """Tests for the folder browser."""

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="2")
    def test_number_picks_child(self, _mock_ask: MagicMock, presenter_with_output, fake_home: Path) -> None:
        """Verify a number maps to the listed subfolder."""
        presenter, output = presenter_with_output

        result = presenter.choose_directory("Browse Folders", fake_home)

        assert result.value == str(fake_home / "music")
        assert "projects" in output.getvalue()

    @patch("syncpick.ui.rich_presenter.Prompt.ask")
    def test_default_is_start(self, mock_ask: MagicMock, presenter_with_output, fake_home: Path) -> None:
        """Verify accepting the default picks the start folder."""
        mock_ask.side_effect = lambda *args, **kwargs: kwargs["default"]
        presenter, _ = presenter_with_output

        result = presenter.choose_directory("Browse Folders", fake_home)

        assert result.value == str(fake_home)

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="docs/letters")
    def test_typed_path_returned_as_is(self, _mock_ask: MagicMock, presenter_with_output, fake_home: Path) -> None:
        presenter, _ = presenter_with_output
        assert presenter.choose_directory("Browse", fake_home).value == "docs/letters"

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="q")
    def test_back(self, _mock_ask: MagicMock, presenter_with_output, fake_home: Path) -> None:
        presenter, _ = presenter_with_output
        assert presenter.choose_directory("Browse", fake_home).is_cancelled

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="1")
    def test_number_without_children_is_path(
        self, _mock_ask: MagicMock, presenter_with_output, fake_home: Path
    ) -> None:
        """Verify a number is treated as a path when there is nothing to pick."""
        presenter, output = presenter_with_output

        result = presenter.choose_directory("Browse", fake_home / "music")

        assert result.value == "1"
        assert "No subfolders" in output.getvalue()

    @patch("syncpick.ui.rich_presenter.Prompt.ask", return_value="q")
    def test_unreadable_start_reports_error(
        self, _mock_ask: MagicMock, presenter_with_output, fake_home: Path
    ) -> None:
        """Verify a listing error is shown instead of being dropped."""
        presenter, output = presenter_with_output

        with patch(
            "syncpick.scanning.directory_lister.os.scandir", side_effect=PermissionError
        ):
            presenter.choose_directory("Browse", fake_home)

        assert "Permission denied" in output.getvalue()
        assert presenter._lister.get_errors() == []
