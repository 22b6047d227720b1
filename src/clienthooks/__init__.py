"""clienthooks - client event hooks for computer blocks."""

from .events import HostEvent
from .hooks import ClientHooks
from .session import ClientSession

__version__ = "0.1.0"

__all__ = ["ClientHooks", "ClientSession", "HostEvent"]
