"""Command-line tokenising and line reading for the shell."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class UserCommand:
    """A parsed command name together with its arguments."""

    cmd: str
    args: list[str] = field(default_factory=list)


def parse(line: str) -> UserCommand | None:
    """Split ``line`` on whitespace into a command and its arguments.

    Returns ``None`` when the line holds no tokens at all.
    """
    tokens = line.split()
    if not tokens:
        return None
    cmd, *args = tokens
    return UserCommand(cmd, args)


def read_line_from_fd(fd: int) -> str | None:
    """Read one line from a raw file descriptor, without its newline.

    Returns ``None`` at end of input when nothing was read. Bytes that are
    not valid UTF-8 are replaced. ``OSError`` from the read propagates.
    """
    line = bytearray()
    while True:
        byte = os.read(fd, 1)
        if not byte:
            break
        if byte == b"\n":
            return line.decode("utf-8", errors="replace")
        line += byte
    if not line:
        return None
    return line.decode("utf-8", errors="replace")