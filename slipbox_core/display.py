"""Display server detection.

The session is classified from three environment variables. Detection is a
pure function of a :class:`DisplayEnv` snapshot so it can be tested without
touching the real process environment.
"""

import enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from slipbox_core.constants import WAYLAND_SESSION, X11_SESSION


class DisplayServer(enum.Enum):
    """The windowing system in use."""
    WAYLAND = "wayland"
    X11 = "x11"
    OTHER = "other"

    def describe(self) -> str:
        return {"wayland": "Wayland", "x11": "X11"}.get(self.value, "an unsupported display server")


class DisplayEnv(BaseModel):
    """The environment variables that decide the display server."""
    model_config = ConfigDict(frozen=True)

    wayland_display: Optional[str] = None
    xdg_session_type: Optional[str] = None
    display: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "DisplayEnv":
        return cls(
            wayland_display=environ.get("WAYLAND_DISPLAY"),
            xdg_session_type=environ.get("XDG_SESSION_TYPE"),
            display=environ.get("DISPLAY"),
        )


def is_wayland(env: DisplayEnv) -> bool:
    # An empty WAYLAND_DISPLAY still counts as set
    return env.wayland_display is not None and env.xdg_session_type == WAYLAND_SESSION


def is_x11(env: DisplayEnv) -> bool:
    return env.display is not None and env.xdg_session_type == X11_SESSION


def detect(env: DisplayEnv) -> DisplayServer:
    """
    Classify the current session.

    Wayland is checked first. Unset variables count as false and never raise.

    Args:
        env: Snapshot of the display related environment variables

    Returns:
        The detected DisplayServer
    """
    if is_wayland(env):
        return DisplayServer.WAYLAND
    if is_x11(env):
        return DisplayServer.X11
    return DisplayServer.OTHER
