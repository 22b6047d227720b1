from __future__ import annotations

import pytest

from clienthooks.registries import MonitorCache, SpeakerRegistry
from clienthooks.session import ClientSession
from clienthooks.types import BlockPos


class _Terminal:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


def test_destroy_all_closes_monitor_terminals() -> None:
    cache = MonitorCache()
    terminal = _Terminal()
    cache.put(BlockPos(0, 1, 2), terminal)

    cache.destroy_all()

    assert terminal.closed is True
    assert cache.get(BlockPos(0, 1, 2)) is None


def test_play_streaming_ignores_unknown_stream() -> None:
    registry = SpeakerRegistry()
    speaker = registry.start("a", object())

    registry.on_play_streaming(object(), object(), object())

    assert speaker.channel is None


def test_reset_reports_failed_registries(monkeypatch: pytest.MonkeyPatch) -> None:
    session = ClientSession()
    session.pocket_computers.put(1, object())
    seen: list[str] = []

    def _boom() -> None:
        raise RuntimeError("speaker engine gone")

    monkeypatch.setattr(session.speakers, "reset", _boom)

    failed = session.reset(on_failure=lambda name, exc: seen.append(name))

    assert failed == ["speakers"]
    assert seen == ["speakers"]
    assert len(session.pocket_computers) == 0


def test_destroy_all_continues_past_failing_close() -> None:
    class _StuckTerminal:
        def close(self) -> None:
            raise OSError("terminal already released")

    cache = MonitorCache()
    first, last = _Terminal(), _Terminal()
    cache.put(BlockPos(0, 0, 0), first)
    cache.put(BlockPos(1, 0, 0), _StuckTerminal())
    cache.put(BlockPos(2, 0, 0), last)

    cache.destroy_all()

    assert first.closed is True
    assert last.closed is True
    assert len(cache) == 0
