"""Application-level exception types for clienthooks."""

from __future__ import annotations


class ClientHooksError(Exception):
    """Base exception for clienthooks."""


class ConfigurationError(ClientHooksError):
    """Raised when settings cannot be turned into a working dispatcher."""


class CollaboratorUnavailableError(ClientHooksError):
    """Raised when a registry or renderer is not initialized."""

    def __init__(self, collaborator: str) -> None:
        super().__init__(f"Collaborator '{collaborator}' is not available")
        self.collaborator = collaborator
