"""
Command execution utilities for slipbox.

This module provides utilities for running external commands with standardized
error handling and output processing. Every call blocks until the child exits.
"""

import os
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple, Dict, Union

from slipbox_core.errors import CommandError

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Class for executing external commands with proper error handling."""

    @staticmethod
    def run(
        cmd: List[str],
        input_data: Optional[str] = None,
        input_file: Optional[Union[str, Path]] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None
    ) -> Tuple[int, str, str]:
        """
        Run a command and return the return code, stdout, and stderr.

        Args:
            cmd: Command to run as a list of strings
            input_data: Optional string to pass as stdin
            input_file: Optional file whose raw bytes are passed as stdin
            env: Optional environment variables to set
            cwd: Optional working directory

        Returns:
            Tuple containing (return_code, stdout, stderr)

        Raises:
            CommandError: If the command cannot be started
            OSError: If input_file cannot be opened
        """
        process_env = os.environ.copy()
        if env:
            process_env.update(env)

        logger.debug(f"Running: {' '.join(cmd)}")
        if input_file is not None:
            # Opened before spawning so a missing file is not blamed on the command
            stdin_file = open(input_file, "rb")
        try:
            if input_file is not None:
                with stdin_file:
                    proc = subprocess.run(
                        cmd,
                        stdin=stdin_file,
                        capture_output=True,
                        env=process_env,
                        cwd=cwd
                    )
                return (
                    proc.returncode,
                    proc.stdout.decode("utf-8", errors="replace"),
                    proc.stderr.decode("utf-8", errors="replace"),
                )
            proc = subprocess.run(
                cmd,
                input=input_data,
                text=True,
                capture_output=True,
                env=process_env,
                cwd=cwd
            )
            return proc.returncode, proc.stdout, proc.stderr
        except OSError as e:
            logger.debug(f"Error running command {' '.join(cmd)}: {e}")
            raise CommandError(cmd, None, str(e)) from e

    @staticmethod
    def run_and_check(
        cmd: List[str],
        input_data: Optional[str] = None,
        input_file: Optional[Union[str, Path]] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None
    ) -> str:
        """
        Run a command, check for errors, and return stdout if successful.

        Raises:
            CommandError: If the command cannot be started or exits non-zero
        """
        rc, stdout, stderr = CommandExecutor.run(cmd, input_data, input_file, env, cwd)
        if rc != 0:
            raise CommandError(cmd, rc, stderr)
        return stdout

    @staticmethod
    def run_interactive(cmd: List[str]) -> None:
        """
        Run a command attached to the terminal, for editors and the like.

        Raises:
            CommandError: If the command cannot be started or exits non-zero
        """
        logger.debug(f"Running in foreground: {' '.join(cmd)}")
        try:
            proc = subprocess.run(cmd)
        except OSError as e:
            raise CommandError(cmd, None, str(e)) from e
        if proc.returncode != 0:
            raise CommandError(cmd, proc.returncode)
