"""syncpick CLI - Interactive Folder Backup.

Runs the interactive backup flow with `python syncpick.py` from a source
checkout. This module re-exports the CLI app from syncpick.cli.

Usage examples:
    # Rich interface
    python syncpick.py

    # dialog widgets
    python syncpick.py --dialog
"""

from syncpick.cli import app

if __name__ == "__main__":
    app()
