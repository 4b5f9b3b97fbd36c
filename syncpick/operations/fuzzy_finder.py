"""fzf integration for multi-folder fuzzy search."""

import logging
import subprocess
from typing import Iterable, List, Optional

from syncpick.models import MissingCapabilityError
from syncpick.operations.capabilities import find_command

logger = logging.getLogger(__name__)


class FzfFinder:
    """Lets the operator fuzzy-pick several entries from a candidate list.

    fzf draws its interface on the controlling terminal, reads candidates
    from stdin and prints the chosen ones on stdout, one per line. Empty
    output means the operator cancelled.
    """

    COMMAND = "fzf"

    def __init__(
        self,
        executable: Optional[str] = None,
        prompt: str = "Select folders: ",
        height: str = "40%",
    ) -> None:
        self.executable = executable or self.COMMAND
        self.prompt = prompt
        self.height = height

    def is_available(self) -> bool:
        return find_command(self.executable) is not None

    def build_command(self) -> List[str]:
        return [
            self.executable,
            "--multi",
            "--height",
            self.height,
            "--border",
            f"--prompt={self.prompt}",
        ]

    def select(self, candidates: Iterable[str]) -> List[str]:
        """Run fzf over `candidates` and return the chosen entries.

        Returns:
            Chosen entries in the order fzf printed them; empty when the
            operator cancelled or nothing matched.

        Raises:
            MissingCapabilityError: If fzf is not installed.
        """
        if not self.is_available():
            raise MissingCapabilityError(self.executable)

        stdin_text = "\n".join(candidates) + "\n"
        try:
            completed = subprocess.run(
                self.build_command(),
                input=stdin_text,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise MissingCapabilityError(self.executable) from e

        # 1: no match, 130: interrupted with Esc or Ctrl-C
        if completed.returncode != 0:
            logger.debug("%s exited with status %d", self.executable, completed.returncode)
            return []

        return [line for line in completed.stdout.splitlines() if line]
