"""Session-scoped context created at world load and dropped at world unload."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from loguru import logger

from clienthooks.registries import MonitorCache, PocketComputerCache, SpeakerRegistry


class Resettable(Protocol):
    def reset(self) -> None: ...


@dataclass
class ClientSession:
    """Registries and storage location for one loaded world.

    ``storage_root`` is only known when the world is hosted by a local server;
    it stays ``None`` for remote servers.
    """

    storage_root: Path | None = None
    monitors: MonitorCache = field(default_factory=MonitorCache)
    speakers: SpeakerRegistry = field(default_factory=SpeakerRegistry)
    pocket_computers: PocketComputerCache = field(default_factory=PocketComputerCache)

    def registries(self) -> dict[str, Resettable]:
        return {
            "monitors": self.monitors,
            "speakers": self.speakers,
            "pocket_computers": self.pocket_computers,
        }

    def reset(self, on_failure: Callable[[str, Exception], None] | None = None) -> list[str]:
        """Reset every registry, continuing past failures.

        Returns the names of the registries whose reset raised.
        """

        failed: list[str] = []
        for name, registry in self.registries().items():
            try:
                registry.reset()
            except Exception as exc:
                logger.opt(exception=True).warning("session.reset_failed registry={}", name)
                failed.append(name)
                if on_failure is not None:
                    on_failure(name, exc)
        return failed
