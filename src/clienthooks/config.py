"""Configuration management for clienthooks."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

CABLE_HIGHLIGHT = "cable_highlight"
MONITOR_HIGHLIGHT = "monitor_highlight"
DEFAULT_HIGHLIGHT_ORDER = (CABLE_HIGHLIGHT, MONITOR_HIGHLIGHT)


class ClientHooksSettings(BaseSettings):
    """Client hook settings."""

    # Rendering
    highlight_order: tuple[str, ...] = Field(
        default=DEFAULT_HIGHLIGHT_ORDER,
        description="Highlight providers in the order they are offered a block outline",
    )

    # Opening computer folders
    open_command: Optional[str] = Field(
        None, description="Program used to open computer folders (platform default when unset)"
    )

    # Session
    storage_root: Optional[Path] = Field(None, description="Storage root used by the CLI when none is given")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    class Config:
        """Pydantic configuration."""

        env_prefix = "CLIENTHOOKS_"
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"


def get_settings(**overrides: object) -> ClientHooksSettings:
    """Get client hook settings.

    Args:
        **overrides: Values taking precedence over the environment

    Returns:
        Settings instance
    """
    return ClientHooksSettings(**overrides)
