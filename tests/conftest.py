from __future__ import annotations

from pathlib import Path

import pytest

from clienthooks.config import ClientHooksSettings
from clienthooks.hooks import ClientHooks
from clienthooks.host import StaticHost, StaticWorld
from clienthooks.session import ClientSession


class RecordingOpener:
    def __init__(self) -> None:
        self.opened: list[Path] = []

    def __call__(self, path: Path) -> None:
        self.opened.append(path)


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def host() -> StaticHost:
    return StaticHost(debug_overlay=True, world=StaticWorld())


@pytest.fixture
def hooks(tmp_path: Path, host: StaticHost, opener: RecordingOpener) -> ClientHooks:
    return ClientHooks(
        host,
        settings=ClientHooksSettings(),
        opener=opener,
        session=ClientSession(storage_root=tmp_path),
    )
