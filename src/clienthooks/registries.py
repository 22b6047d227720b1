"""Client-side registries owned by a session.

Each registry is a plain in-memory store with an explicit ``reset``. The host
fills them while a world is loaded; the hook layer only resets them at world
unload and forwards audio channels to the speaker registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from clienthooks.types import BlockPos


class MonitorCache:
    """Client-side terminal state for monitors, keyed by block position."""

    def __init__(self) -> None:
        self._monitors: dict[BlockPos, Any] = {}

    def __len__(self) -> int:
        return len(self._monitors)

    def put(self, pos: BlockPos, state: Any) -> None:
        self._monitors[pos] = state

    def get(self, pos: BlockPos) -> Any | None:
        return self._monitors.get(pos)

    def destroy_all(self) -> None:
        for pos, state in self._monitors.items():
            close = getattr(state, "close", None)
            if not callable(close):
                continue
            try:
                close()
            except Exception:
                logger.opt(exception=True).warning("monitor.close_failed pos={}", pos)
                continue
            logger.debug("monitor.destroyed pos={}", pos)
        self._monitors.clear()

    def reset(self) -> None:
        self.destroy_all()


@dataclass
class SpeakerInstance:
    """One playing speaker and the audio channel the host attached to it."""

    speaker_id: str
    stream: Any
    channel: Any = None
    engine: Any = None


@dataclass
class SpeakerRegistry:
    """Speakers currently streaming audio, keyed by speaker id."""

    speakers: dict[str, SpeakerInstance] = field(default_factory=dict)

    def start(self, speaker_id: str, stream: Any) -> SpeakerInstance:
        speaker = SpeakerInstance(speaker_id=speaker_id, stream=stream)
        self.speakers[speaker_id] = speaker
        return speaker

    def on_play_streaming(self, engine: Any, channel: Any, stream: Any) -> None:
        """Attach the channel the host opened for ``stream`` to its speaker."""

        for speaker in self.speakers.values():
            if speaker.stream is stream:
                speaker.channel = channel
                speaker.engine = engine
                return

    def reset(self) -> None:
        self.speakers.clear()


class PocketComputerCache:
    """Last known client state of each pocket computer instance."""

    def __init__(self) -> None:
        self._computers: dict[int, Any] = {}

    def __len__(self) -> int:
        return len(self._computers)

    def put(self, instance_id: int, state: Any) -> None:
        self._computers[instance_id] = state

    def get(self, instance_id: int) -> Any | None:
        return self._computers.get(instance_id)

    def reset(self) -> None:
        self._computers.clear()
