"""
A small wrapper around the fzf fuzzy finder.

Builds the fzf command line and streams a list of items through it.
"""

import subprocess
import logging
from typing import List, Optional

from slipbox_core.constants import FZF_COMMAND
from slipbox_core.errors import CommandError

logger = logging.getLogger(__name__)


class FzfManager:
    """A class for configuring and running fzf."""

    def __init__(self, preview_command: Optional[str] = None, command: str = FZF_COMMAND):
        """
        Initialize a new FzfManager instance.

        Args:
            preview_command: Optional preview command; {} is replaced by fzf with the current line
            command: The chooser binary to run
        """
        self.command = command
        self.preview_command = preview_command

    def get_fzf_args(self, additional_args: Optional[List[str]] = None) -> List[str]:
        """
        Build the complete fzf arguments list.

        Args:
            additional_args: Additional arguments to add to the fzf command

        Returns:
            List of strings to pass to subprocess.run
        """
        fzf_args = [self.command]
        if self.preview_command:
            fzf_args.extend(["--preview", self.preview_command])
        if additional_args:
            fzf_args.extend(additional_args)
        return fzf_args

    def run(self, items: List[str], additional_args: Optional[List[str]] = None) -> List[str]:
        """
        Run fzf over items and return the selected lines.

        fzf draws on the terminal, so only stdout is captured. An aborted
        selection (no output) gives an empty list.

        Raises:
            CommandError: If fzf cannot be started
        """
        fzf_args = self.get_fzf_args(additional_args)
        input_data = "\n".join(items)
        try:
            result = subprocess.run(fzf_args, input=input_data, text=True, stdout=subprocess.PIPE)
        except OSError as e:
            logger.error(f"Error running fzf: {e}")
            raise CommandError(fzf_args, None, str(e)) from e
        logger.debug(f"fzf exited with status {result.returncode}")
        return [line for line in result.stdout.split("\n") if line]
