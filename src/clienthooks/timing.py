"""Frame counters and the pause-aware timer driven by tick events."""

from __future__ import annotations

import time
from collections.abc import Callable


class FrameInfo:
    """Counts client ticks and rendered frames."""

    def __init__(self) -> None:
        self.tick = 0
        self.render_frame = 0

    def on_tick(self) -> None:
        self.tick += 1

    def on_render_tick(self) -> None:
        self.render_frame += 1

    def cursor_blink(self) -> bool:
        """Whether a blinking terminal cursor is in its visible phase."""
        return (self.tick // 8) % 2 == 0


class PauseAwareTimer:
    """Monotonic clock that stops advancing while the host is paused."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._paused = False
        self._pause_started = 0
        self._paused_total = 0

    @property
    def paused(self) -> bool:
        return self._paused

    def tick(self, paused: bool) -> None:
        if paused == self._paused:
            return
        now = self._clock()
        if paused:
            self._pause_started = now
        else:
            self._paused_total += now - self._pause_started
        self._paused = paused

    def now_ns(self) -> int:
        """Current time in nanoseconds, excluding every paused interval."""
        now = self._pause_started if self._paused else self._clock()
        return now - self._paused_total
