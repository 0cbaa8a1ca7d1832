"""Runtime settings for slipbox.

There is no configuration file. Everything the program needs from its
environment is read once at startup into a :class:`Settings` object, which
is then handed to the components that need it.
"""

import os
import logging
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slipbox_core.constants import DEFAULT_EDITOR, LOG_FORMAT, NOTES_SUBDIR
from slipbox_core.display import DisplayEnv, DisplayServer, detect
from slipbox_core.errors import EnvironmentConfigError

logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration model."""
    level: str = Field(default="WARNING", description="Logging level")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid logging level: {v}")
        return v.upper()

    @classmethod
    def from_debug_count(cls, debug: int) -> "LoggingConfig":
        """Map the repeatable --debug flag onto a logging level."""
        if debug <= 0:
            return cls(level="WARNING")
        if debug == 1:
            return cls(level="INFO")
        return cls(level="DEBUG")


class Settings(BaseModel):
    """Environment snapshot shared by all commands."""
    model_config = ConfigDict(frozen=True)

    home: Optional[str] = Field(default=None, description="The user's home directory ($HOME)")
    editor: Optional[str] = Field(default=None, description="Value of $EDITOR, if set")
    display_env: DisplayEnv = Field(default_factory=DisplayEnv, description="Display server variables")

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from an environment mapping.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A validated Settings instance
        """
        environ = os.environ if environ is None else environ
        settings = cls(
            home=environ.get("HOME"),
            editor=environ.get("EDITOR"),
            display_env=DisplayEnv.from_environ(environ),
        )
        logger.debug(f"Loaded settings: home={settings.home} editor={settings.editor}")
        return settings

    @property
    def notes_dir(self) -> str:
        """
        The notes root, $HOME/Notes/slipbox.

        Raises:
            EnvironmentConfigError: If HOME is not set
        """
        if self.home is None:
            raise EnvironmentConfigError("No $HOME variable found")
        return f"{self.home}/{NOTES_SUBDIR}"

    def resolve_editor(self, cli_editor: Optional[str] = None) -> str:
        """Pick the editor: --editor first, then $EDITOR, then the default."""
        if cli_editor:
            return cli_editor
        return self.editor or DEFAULT_EDITOR

    def display_server(self) -> DisplayServer:
        """Detect the display server. Evaluated on every call."""
        return detect(self.display_env)


def setup_logging(debug: int = 0) -> LoggingConfig:
    """Configure the root logger from the --debug count."""
    config = LoggingConfig.from_debug_count(debug)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, config.level))
    return config
