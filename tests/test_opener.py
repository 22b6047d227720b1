from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

import pytest

from clienthooks.opener import PathOpener


def test_opener_launches_configured_command_without_waiting(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    launched: list[tuple[list[str], dict[str, Any]]] = []

    class _FakePopen:
        def __init__(self, args: list[str], **kwargs: Any) -> None:
            launched.append((args, kwargs))

        def wait(self) -> int:
            raise AssertionError("opener must not wait for the file manager")

    monkeypatch.setattr(subprocess, "Popen", _FakePopen)

    PathOpener("my-file-manager")(tmp_path)

    assert launched[0][0] == ["my-file-manager", str(tmp_path)]
    assert launched[0][1]["start_new_session"] is True


def test_opener_picks_platform_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("clienthooks.opener.sys.platform", "darwin")
    assert PathOpener().command == "open"

    monkeypatch.setattr("clienthooks.opener.sys.platform", "linux")
    assert PathOpener().command == "xdg-open"
