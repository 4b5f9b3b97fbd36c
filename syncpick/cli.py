"""
Interactive Folder Backup - CLI Interface.

Starts the interactive flow: select any number of source folders, choose a
destination, confirm, and back everything up with rsync. A timestamped raw
log and a summary report are written into the destination.

Usage Examples:
    # Interactive backup with the Rich interface
    syncpick

    # Use the `dialog` program for menus and checklists
    syncpick --dialog

    # Debug logging on stderr
    syncpick --verbose

Exit codes:
    0  Backup completed, or the operator left from the selection menu
    1  A required command (rsync, or dialog with --dialog) is missing
    2  The operator cancelled the backup
    *  Exit status of the first rsync invocation that failed
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from syncpick.models import MissingCapabilityError, UserCancelledError
from syncpick.operations import RsyncEngine, require_commands
from syncpick.orchestration import BackupSession
from syncpick.ui import DialogPresenter, RichPresenter

__version__ = "1.0.0"

# Exit status for a backup cancelled by the operator
EXIT_CANCELLED = 2

# Initialize Typer app
app = typer.Typer(
    name="syncpick",
    help="Interactive Folder Backup - Select folders and back them up with rsync.",
    add_completion=False,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"Interactive Folder Backup v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send diagnostic logging to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    use_dialog: bool = typer.Option(
        False,
        "--dialog",
        help="Use the dialog program instead of the built-in Rich interface.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """
    Interactively select folders and back them up.

    Runs the complete workflow:
    1. Check that rsync (and dialog, if requested) is installed
    2. Select source folders (browse, fuzzy search, subfolders)
    3. Choose and validate the destination
    4. Confirm and run rsync for every folder with progress
    5. Show the summary report and, on request, the raw log
    """
    configure_logging(verbose)

    required = [RsyncEngine.COMMAND]
    if use_dialog:
        required.append(DialogPresenter.COMMAND)

    try:
        require_commands(required)
    except MissingCapabilityError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    presenter = DialogPresenter() if use_dialog else RichPresenter(console=console)
    session = BackupSession(presenter)

    try:
        result = session.run()

    except UserCancelledError as e:
        console.print(f"[yellow]{e}[/yellow]")
        console.print("Finished. Thank you for using syncpick!")
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        console.print("\n[yellow]Backup interrupted by user.[/yellow]")
        raise typer.Exit(EXIT_CANCELLED)

    except PermissionError as e:
        console.print(f"[red]Error:[/red] Permission denied - {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print("Finished. Thank you for using syncpick!")

    if result is not None and result.failed:
        console.print(
            f"[yellow]Completed with {result.failed} failed folder(s).[/yellow] "
            f"[dim]See {result.log_path}[/dim]"
        )
        raise typer.Exit(result.first_failure_code)


if __name__ == "__main__":
    app()
