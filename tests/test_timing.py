from __future__ import annotations

from clienthooks.timing import FrameInfo, PauseAwareTimer


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


def test_timer_excludes_paused_time() -> None:
    clock = _FakeClock()
    timer = PauseAwareTimer(clock)

    clock.now = 100
    timer.tick(paused=False)
    assert timer.now_ns() == 100

    timer.tick(paused=True)
    clock.now = 250
    assert timer.now_ns() == 100

    timer.tick(paused=False)
    clock.now = 300
    assert timer.now_ns() == 150


def test_repeated_pause_state_is_ignored() -> None:
    clock = _FakeClock()
    timer = PauseAwareTimer(clock)

    clock.now = 10
    timer.tick(paused=True)
    clock.now = 20
    timer.tick(paused=True)
    clock.now = 30
    timer.tick(paused=False)

    assert timer.now_ns() == 10


def test_cursor_blinks_every_eight_ticks() -> None:
    frames = FrameInfo()
    phases = []
    for _ in range(16):
        phases.append(frames.cursor_blink())
        frames.on_tick()

    assert phases == [True] * 8 + [False] * 8
