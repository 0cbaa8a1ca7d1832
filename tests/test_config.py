#!/usr/bin/env python3
"""
Tests for config module.
"""

import logging

import pytest
from pydantic import ValidationError

from slipbox_core.config import LoggingConfig, Settings, setup_logging
from slipbox_core.display import DisplayServer
from slipbox_core.errors import EnvironmentConfigError


def test_settings_from_environ():
    """Settings pick up everything the program reads from the environment."""
    settings = Settings.from_environ({
        "HOME": "/home/test",
        "EDITOR": "vim",
        "WAYLAND_DISPLAY": "wayland-0",
        "XDG_SESSION_TYPE": "wayland",
    })
    assert settings.home == "/home/test"
    assert settings.editor == "vim"
    assert settings.notes_dir == "/home/test/Notes/slipbox"
    assert settings.display_server() is DisplayServer.WAYLAND


def test_settings_missing_home():
    """HOME is only needed once the notes root is asked for."""
    settings = Settings.from_environ({"DISPLAY": ":0", "XDG_SESSION_TYPE": "x11"})
    assert settings.display_server() is DisplayServer.X11
    with pytest.raises(EnvironmentConfigError):
        settings.notes_dir


def test_resolve_editor():
    """--editor beats $EDITOR, which beats the default."""
    settings = Settings.from_environ({"HOME": "/home/test", "EDITOR": "vim"})
    assert settings.resolve_editor("emacs") == "emacs"
    assert settings.resolve_editor(None) == "vim"
    assert Settings.from_environ({"HOME": "/home/test"}).resolve_editor(None) == "nvim"


def test_settings_are_frozen():
    settings = Settings.from_environ({"HOME": "/home/test"})
    with pytest.raises(ValidationError):
        settings.home = "/elsewhere"


def test_logging_config_from_debug_count():
    assert LoggingConfig.from_debug_count(0).level == "WARNING"
    assert LoggingConfig.from_debug_count(1).level == "INFO"
    assert LoggingConfig.from_debug_count(2).level == "DEBUG"
    assert LoggingConfig.from_debug_count(5).level == "DEBUG"


def test_logging_config_validates_level():
    assert LoggingConfig(level="debug").level == "DEBUG"
    with pytest.raises(ValidationError):
        LoggingConfig(level="LOUD")


def test_setup_logging():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging(2)
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
