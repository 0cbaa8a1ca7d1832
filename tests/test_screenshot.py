#!/usr/bin/env python3
"""
Tests for screenshot capture.
"""

import os
import datetime
from unittest.mock import patch, MagicMock

import pytest

from slipbox_core.config import Settings
from slipbox_core.display import DisplayEnv
from slipbox_core.errors import ClipboardError, CommandError, ScreenshotError, UnsupportedDisplayServerError
from slipbox_core.screenshot import (
    WaylandScreenshot, X11Screenshot, capture, default_output_path, get_screenshot_backend
)

WAYLAND = Settings(home="/home/test", display_env=DisplayEnv(wayland_display="wayland-0", xdg_session_type="wayland"))
X11 = Settings(home="/home/test", display_env=DisplayEnv(display=":0", xdg_session_type="x11"))
OTHER = Settings(home="/home/test")


def test_default_output_path(tmp_path):
    """The generated name is a timestamp and the directory is created."""
    directory = str(tmp_path / "screenshots")
    now = datetime.datetime(2024, 3, 5, 7, 8, 9)

    path = default_output_path(now, directory=directory)

    assert path == os.path.join(directory, "2024-03-05_07-08-09.png")
    assert os.path.isdir(directory)


def test_get_screenshot_backend():
    assert isinstance(get_screenshot_backend(WAYLAND.display_server()), WaylandScreenshot)
    assert isinstance(get_screenshot_backend(X11.display_server()), X11Screenshot)


@patch("slipbox_core.screenshot.os.makedirs")
@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_unsupported_display(mock_run, mock_makedirs, tmp_path):
    """Nothing is captured or created on an unsupported session."""
    output = tmp_path / "shot.png"

    with pytest.raises(UnsupportedDisplayServerError):
        capture(OTHER, output=str(output))
    with pytest.raises(UnsupportedDisplayServerError):
        capture(OTHER)

    assert not output.exists()
    mock_run.assert_not_called()
    mock_makedirs.assert_not_called()


@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_wayland(mock_run, tmp_path, capsys):
    """slurp picks the region and grim grabs it."""
    output = str(tmp_path / "shot.png")
    mock_run.side_effect = ["10,20 300x200\n", ""]

    result = capture(WAYLAND, output=output)

    assert result.path == output
    assert result.captured is True
    assert result.copied is None
    assert mock_run.call_args_list[0][0][0] == ["slurp"]
    assert mock_run.call_args_list[1][0][0] == ["grim", "-g", "10,20 300x200", output]
    assert "Running on Wayland" in capsys.readouterr().out


@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_wayland_slurp_failure(mock_run, tmp_path):
    """A cancelled selection aborts before grim runs."""
    mock_run.side_effect = CommandError(["slurp"], 1, "selection cancelled")

    with pytest.raises(ScreenshotError):
        capture(WAYLAND, output=str(tmp_path / "shot.png"))
    assert mock_run.call_count == 1


@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_x11(mock_run, tmp_path, capsys):
    """maim selects and grabs in one go."""
    output = str(tmp_path / "shot.png")
    mock_run.return_value = ""

    result = capture(X11, output=output)

    assert result.captured is True
    mock_run.assert_called_once_with(["maim", "--select", output])
    assert "Running on X11" in capsys.readouterr().out


@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_x11_failure(mock_run, tmp_path):
    mock_run.side_effect = CommandError(["maim"], None, "not found")
    with pytest.raises(ScreenshotError):
        capture(X11, output=str(tmp_path / "shot.png"))


@patch.object(WaylandScreenshot, "copy_to_clipboard")
@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_with_clipboard(mock_run, mock_copy, tmp_path, capsys):
    output = str(tmp_path / "shot.png")
    mock_run.side_effect = ["0,0 10x10", ""]

    result = capture(WAYLAND, output=output, clipboard=True)

    mock_copy.assert_called_once_with(output)
    assert result.copied is True
    assert "Copied to clipboard" in capsys.readouterr().out


@patch.object(X11Screenshot, "copy_to_clipboard")
@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_clipboard_failure_keeps_capture(mock_run, mock_copy, tmp_path, capsys):
    """A failed copy is reported but the capture still succeeds."""
    output = str(tmp_path / "shot.png")
    mock_run.return_value = ""
    mock_copy.side_effect = ClipboardError("xclip missing")

    result = capture(X11, output=output, clipboard=True)

    assert result.captured is True
    assert result.copied is False
    assert "Failed to copy to clipboard: xclip missing" in capsys.readouterr().err


@patch("slipbox_core.screenshot.default_output_path")
@patch("slipbox_core.screenshot.CommandExecutor.run_and_check")
def test_capture_generates_path(mock_run, mock_default, tmp_path):
    generated = str(tmp_path / "2024-01-01_00-00-00.png")
    mock_default.return_value = generated
    mock_run.return_value = ""

    result = capture(X11)

    assert result.path == generated
    mock_run.assert_called_once_with(["maim", "--select", generated])
