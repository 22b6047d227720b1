"""Open a directory in the platform file manager."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from loguru import logger


def default_open_command() -> str | None:
    if sys.platform == "win32":
        return None
    if sys.platform == "darwin":
        return "open"
    return "xdg-open"


class PathOpener:
    """Fire-and-forget launcher; the spawned process is never waited on."""

    def __init__(self, command: str | None = None) -> None:
        self.command = command or default_open_command()

    def __call__(self, path: Path) -> None:
        if self.command is None:
            os.startfile(path)  # type: ignore[attr-defined]  # noqa: S606
            return
        subprocess.Popen(  # noqa: S603
            [self.command, str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        logger.debug("opener.launched command={} path={}", self.command, path)
