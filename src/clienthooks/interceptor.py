"""Hidden chat command that opens a computer's folder on disk.

The command is not a real chat command: it is typed into chat by clickable
text on the server side, and intercepted here before the message is sent so
players never see it.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from loguru import logger

OPEN_COMPUTER = "/computercraft open-computer "
COMPUTER_ID_RE = re.compile(r"[0-9]+")
MAX_COMPUTER_ID = 2**31 - 1
# Control characters and the ASCII space; other Unicode whitespace is not trimmed.
TRIM_CHARS = "".join(map(chr, range(0x21)))

StorageRootProvider = Callable[[], Path | None]
Opener = Callable[[Path], object]


def parse_computer_id(text: str) -> int | None:
    """Parse a trimmed computer id, returning ``None`` for anything invalid."""

    if COMPUTER_ID_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if value > MAX_COMPUTER_ID:
        return None
    return value


def computer_dir(storage_root: Path, computer_id: int) -> Path:
    return storage_root / "computer" / str(computer_id)


class CommandInterceptor:
    """Consume the open-computer command when it names an existing folder."""

    def __init__(self, storage_root: StorageRootProvider, opener: Opener, *, prefix: str = OPEN_COMPUTER) -> None:
        self._storage_root = storage_root
        self._opener = opener
        self._prefix = prefix

    def resolve(self, text: str) -> Path | None:
        """Return the folder ``text`` asks to open, or ``None`` when it is not a match."""

        if not text.startswith(self._prefix):
            return None

        storage_root = self._storage_root()
        if storage_root is None:
            return None

        computer_id = parse_computer_id(text[len(self._prefix) :].strip(TRIM_CHARS))
        if computer_id is None:
            return None

        folder = computer_dir(storage_root, computer_id)
        if not folder.is_dir():
            return None
        return folder

    def try_handle(self, text: str) -> bool:
        """Open the requested folder. ``True`` means the chat message must not be sent."""

        folder = self.resolve(text)
        if folder is None:
            return False

        try:
            self._opener(folder)
        except OSError:
            logger.opt(exception=True).warning("interceptor.open_failed path={}", folder)
        return True
