"""
Screenshot capture for Wayland and X11.

Wayland selects a region with slurp and grabs it with grim; X11 lets maim
do both. The resulting file can be pushed to the image clipboard afterwards.
"""

import os
import abc
import logging
import datetime
from dataclasses import dataclass
from typing import Optional

import typer

from slipbox_core.clipboard import ClipboardBackend, WaylandClipboard, X11Clipboard
from slipbox_core.commands import CommandExecutor
from slipbox_core.config import Settings
from slipbox_core.constants import SCREENSHOT_DIR, SCREENSHOT_EXTENSION, SCREENSHOT_TIME_FORMAT
from slipbox_core.display import DisplayServer
from slipbox_core.errors import ClipboardError, CommandError, ScreenshotError, UnsupportedDisplayServerError

logger = logging.getLogger(__name__)


@dataclass
class ScreenshotResult:
    """Outcome of a capture. copied is None when no copy was requested."""
    path: str
    captured: bool = False
    copied: Optional[bool] = None


class ScreenshotBackend(abc.ABC):
    """Tool chain for one display server."""
    display: DisplayServer
    clipboard: ClipboardBackend

    @abc.abstractmethod
    def select_region(self) -> Optional[str]:
        """Ask the user for a region. Returns None if grab() selects by itself."""

    @abc.abstractmethod
    def grab(self, region: Optional[str], path: str) -> None:
        """Write a screenshot of region to path."""

    def copy_to_clipboard(self, path: str) -> None:
        self.clipboard.copy_image(path)


class WaylandScreenshot(ScreenshotBackend):
    display = DisplayServer.WAYLAND

    def __init__(self) -> None:
        self.clipboard = WaylandClipboard()

    def select_region(self) -> Optional[str]:
        try:
            geometry = CommandExecutor.run_and_check(["slurp"]).strip()
        except CommandError as e:
            raise ScreenshotError(f"Failed to get dimensions using slurp (Is slurp installed?): {e}") from e
        if not geometry:
            raise ScreenshotError("slurp returned no region")
        return geometry

    def grab(self, region: Optional[str], path: str) -> None:
        try:
            CommandExecutor.run_and_check(["grim", "-g", region, path])
        except CommandError as e:
            raise ScreenshotError(f"Failed to take screenshot: {e}") from e


class X11Screenshot(ScreenshotBackend):
    display = DisplayServer.X11

    def __init__(self) -> None:
        self.clipboard = X11Clipboard()

    def select_region(self) -> Optional[str]:
        # maim --select does its own selection
        return None

    def grab(self, region: Optional[str], path: str) -> None:
        try:
            CommandExecutor.run_and_check(["maim", "--select", path])
        except CommandError as e:
            raise ScreenshotError(f"Failed to take screenshot: {e}") from e


def get_screenshot_backend(display: DisplayServer) -> ScreenshotBackend:
    if display is DisplayServer.WAYLAND:
        return WaylandScreenshot()
    if display is DisplayServer.X11:
        return X11Screenshot()
    raise UnsupportedDisplayServerError("Screenshot only implemented for Wayland and X11")


def default_output_path(now: Optional[datetime.datetime] = None, directory: str = SCREENSHOT_DIR) -> str:
    """
    Build /tmp/screenshots/<YYYY-MM-DD_HH-MM-SS>.png, creating the directory.

    Args:
        now: Timestamp to use (defaults to the current local time)
        directory: Directory the screenshot goes into

    Returns:
        The output path as a string
    """
    now = now or datetime.datetime.now()
    os.makedirs(directory, exist_ok=True)
    return os.path.join(directory, f"{now.strftime(SCREENSHOT_TIME_FORMAT)}{SCREENSHOT_EXTENSION}")


def capture(
    settings: Settings,
    output: Optional[str] = None,
    clipboard: bool = False,
    now: Optional[datetime.datetime] = None,
) -> ScreenshotResult:
    """
    Take a screenshot and optionally copy it to the clipboard.

    The backend is chosen before anything touches the filesystem, so an
    unsupported session leaves no directory or file behind. A failed clipboard
    copy is reported but the capture still counts as a success.

    Args:
        settings: Runtime settings (used for display detection)
        output: Output file path; generated when omitted
        clipboard: Whether to copy the image to the clipboard
        now: Timestamp for the generated file name

    Returns:
        ScreenshotResult describing what happened

    Raises:
        UnsupportedDisplayServerError: On a session that is neither Wayland nor X11
        ScreenshotError: If region selection or capture fails
    """
    display = settings.display_server()
    backend = get_screenshot_backend(display)
    typer.echo(f"Running on {display.describe()}")

    path = output or default_output_path(now)
    region = backend.select_region()
    backend.grab(region, path)
    result = ScreenshotResult(path=path, captured=True)
    logger.info(f"Screenshot saved: {path}")

    if clipboard:
        try:
            backend.copy_to_clipboard(path)
        except ClipboardError as e:
            result.copied = False
            typer.echo(f"Failed to copy to clipboard: {e}", err=True)
        else:
            result.copied = True
            typer.echo("Copied to clipboard")
    return result
