"""Clipboard access for Wayland and X11.

Each display server gets a small backend naming the tools it shells out to.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from slipbox_core.commands import CommandExecutor
from slipbox_core.constants import IMAGE_MIME_TYPE
from slipbox_core.display import DisplayServer
from slipbox_core.errors import ClipboardError, CommandError, UnsupportedDisplayServerError

logger = logging.getLogger(__name__)


class ClipboardBackend:
    """Commands used to talk to one display server's clipboard."""
    name = ""
    read_cmd: List[str] = []
    write_cmd: List[str] = []
    image_cmd: List[str] = []

    def read(self) -> Optional[str]:
        """Return the clipboard text, or None if it is empty or unreadable."""
        try:
            rc, stdout, stderr = CommandExecutor.run(self.read_cmd)
        except CommandError as e:
            logger.warning(f"Could not read clipboard: {e}")
            return None
        except UnicodeDecodeError as e:
            logger.warning(f"Clipboard does not hold UTF-8 text: {e}")
            return None
        if rc != 0:
            logger.warning(f"Could not read clipboard: {stderr.strip()}")
            return None
        text = stdout.rstrip("\n")
        return text or None

    def write(self, text: str) -> None:
        try:
            CommandExecutor.run_and_check(self.write_cmd, input_data=text)
        except CommandError as e:
            raise ClipboardError(f"Failed to write clipboard with {self.name}: {e}") from e

    def copy_image(self, path: Union[str, Path]) -> None:
        try:
            CommandExecutor.run_and_check(self.image_cmd, input_file=path)
        except (CommandError, OSError) as e:
            raise ClipboardError(f"Failed to copy {path} to clipboard: {e}") from e


class WaylandClipboard(ClipboardBackend):
    name = "wl-copy"
    read_cmd = ["wl-paste"]
    write_cmd = ["wl-copy"]
    image_cmd = ["wl-copy", "-t", IMAGE_MIME_TYPE]


class X11Clipboard(ClipboardBackend):
    name = "xclip"
    read_cmd = ["xclip", "-o"]
    write_cmd = ["xclip"]
    image_cmd = ["xclip", "-selection", "clipboard", "-t", IMAGE_MIME_TYPE]


def get_clipboard_backend(display: DisplayServer) -> ClipboardBackend:
    """
    Pick the clipboard backend for a display server.

    Raises:
        UnsupportedDisplayServerError: If the display server is neither Wayland nor X11
    """
    if display is DisplayServer.WAYLAND:
        return WaylandClipboard()
    if display is DisplayServer.X11:
        return X11Clipboard()
    raise UnsupportedDisplayServerError("Clipboard only implemented for Wayland and X11")


def read_clipboard(display: DisplayServer) -> Optional[str]:
    return get_clipboard_backend(display).read()


def write_clipboard(text: str, display: DisplayServer) -> None:
    get_clipboard_backend(display).write(text)


def copy_image(path: Union[str, Path], display: DisplayServer) -> None:
    get_clipboard_backend(display).copy_image(path)
