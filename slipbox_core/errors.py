"""Exceptions raised by slipbox.

Library code raises these; the command line layer reports them and exits.
"""

from typing import List, Optional


class SlipboxError(Exception):
    """Base class for all slipbox errors."""


class EnvironmentConfigError(SlipboxError):
    """A required environment variable is missing."""


class CommandError(SlipboxError):
    """An external command could not be spawned or exited with an error."""

    def __init__(self, cmd: List[str], returncode: Optional[int] = None, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Could not run '{cmd[0]}' (is it installed?)"
        else:
            message = f"Command '{' '.join(cmd)}' exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class ClipboardError(SlipboxError):
    """Reading or writing the clipboard failed."""


class UnsupportedDisplayServerError(SlipboxError):
    """The current session is neither Wayland nor X11."""


class ScreenshotError(SlipboxError):
    """Taking a screenshot failed."""


class EditorError(SlipboxError):
    """The editor could not be launched or exited with an error."""


class SubPageError(SlipboxError):
    """A sub-page path could not be derived from the source note."""
