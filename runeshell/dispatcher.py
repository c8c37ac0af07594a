"""Built-in commands, executable lookup and process replacement."""

from __future__ import annotations

import os
import re
import signal
import stat
import sys
from pathlib import Path
from typing import TextIO

BUILTINS = frozenset({"cd", "pwd", "exit", "echo"})
DEFAULT_CONFIG = "../rune.conf"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def is_builtin(cmd: str) -> bool:
    """Return whether ``cmd`` names a shell built-in."""
    return cmd in BUILTINS


def _exit_code(args: list[str]) -> int:
    if not args or not _INT_RE.fullmatch(args[0]):
        return 0
    value = int(args[0])
    return value if _I32_MIN <= value <= _I32_MAX else 0


def _echo_text(args: list[str]) -> str:
    no_newline = False
    words = iter(args)
    shown: list[str] = []
    for arg in words:
        if arg == "-n":
            no_newline = True
        else:
            shown.append(arg)
            break
    shown.extend(words)
    text = " ".join(shown)
    return text if no_newline else text + "\n"


def _write_all(fd: int, text: str) -> None:
    data = text.encode()
    while data:
        written = os.write(fd, data)
        data = data[written:]


def run_builtin(cmd: str, args: list[str], input_fd: int = 0, output_fd: int = 1) -> None:
    """Run the built-in ``cmd``, writing any output to ``output_fd``.

    ``exit`` raises ``SystemExit`` with its numeric argument, or 0.
    """
    if cmd == "exit":
        raise SystemExit(_exit_code(args))
    if cmd == "cd":
        dest = args[0] if args else os.environ.get("HOME", "/")
        try:
            os.chdir(dest)
        except OSError as exc:
            _write_all(
                output_fd,
                f"failed to change directories!\ncd {dest} : "
                f"{exc.strerror} (os error {exc.errno})",
            )
    elif cmd == "pwd":
        try:
            cwd = os.getcwd()
        except OSError:
            return
        _write_all(output_fd, cwd + "\n")
    elif cmd == "echo":
        _write_all(output_fd, _echo_text(args))


def builtin_echo(args: list[str], out: TextIO | None = None) -> None:
    """Print ``args`` separated by spaces; leading ``-n`` flags drop the newline."""
    stream = sys.stdout if out is None else out
    stream.write(_echo_text(args))
    stream.flush()


def exec_external(cmd: str, args: list[str], input_fd: int = 0, output_fd: int = 1) -> None:
    """Replace the current process with ``cmd`` using the given stdin and stdout.

    Never returns: on failure a message goes to stderr and the process exits with 1.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        if input_fd != 0:
            os.dup2(input_fd, 0)
        if output_fd != 1:
            os.dup2(output_fd, 1)
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
        os.execvp(cmd, [cmd, *args])
    except OSError as exc:
        os.write(2, f"rune: failed to execute {cmd}: {exc}\n".encode())
    os._exit(1)


def load_paths(conf_path: str | os.PathLike[str] = DEFAULT_CONFIG) -> list[Path]:
    """Read executable search directories, one per line, from ``conf_path``."""
    text = Path(conf_path).read_text()
    return [Path(line.strip()) for line in text.splitlines()]


def is_executable(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` is a regular file with any execute bit set."""
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & 0o111)


def find_command(cmd: str, search_paths: list[Path]) -> Path | None:
    """Locate ``cmd``: directly if it contains a slash, else in ``search_paths``."""
    if "/" in cmd:
        path = Path(cmd)
        return path if is_executable(path) else None
    return next(
        (Path(d) / cmd for d in search_paths if is_executable(Path(d) / cmd)),
        None,
    )