"""The interactive read-eval loop and command execution."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

from runeshell.dispatcher import (
    DEFAULT_CONFIG,
    exec_external,
    find_command,
    is_builtin,
    load_paths,
    run_builtin,
)
from runeshell.parser import UserCommand, parse, read_line_from_fd

PROMPT = b"RuneShell $ "


def split_pipeline(line: str) -> list[str]:
    """Split a command line on ``|`` into trimmed segments."""
    return [segment.strip() for segment in line.split("|")]


def _parse_or_fail(text: str, message: str) -> UserCommand:
    user_cmd = parse(text)
    if user_cmd is None:
        raise ValueError(message)
    return user_cmd


def run(line: str, search_paths: list[Path]) -> int | None:
    """Run a single command in the foreground.

    Returns the external command's exit code, or ``None`` for built-ins and
    commands that could not be started.
    """
    user_cmd = _parse_or_fail(line, "Failed to parse!")
    if is_builtin(user_cmd.cmd):
        run_builtin(user_cmd.cmd, user_cmd.args, 0, 1)
        return None
    exe = find_command(user_cmd.cmd, search_paths)
    if exe is None:
        print(f"rune command not found: {user_cmd.cmd}", flush=True)
        return None
    sys.stdout.flush()
    try:
        return subprocess.run([str(exe), *user_cmd.args]).returncode
    except OSError as exc:
        print(f"rune: failed to exec '{user_cmd.cmd}': {exc}", file=sys.stderr, flush=True)
        return None


def _run_child(user_cmd: UserCommand, search_paths: list[Path]) -> int:
    if is_builtin(user_cmd.cmd):
        run_builtin(user_cmd.cmd, user_cmd.args, 0, 1)
        return 0
    exe = find_command(user_cmd.cmd, search_paths)
    if exe is None:
        os.write(1, f"rune command not found: {user_cmd.cmd}\n".encode())
        return 1
    exec_external(str(exe), user_cmd.args, 0, 1)
    return 1


def run_pipeline(segments: list[str], search_paths: list[Path]) -> list[int | None]:
    """Run the segments as a pipeline in one process group and wait for them.

    Returns each stage's exit code, or ``None`` for a stage that stopped.
    """
    commands = [
        _parse_or_fail(seg, "Failed to parse the command in given pipeline segment")
        for seg in segments
    ]
    pids: list[int] = []
    input_fd = 0
    pgid: int | None = None
    last = len(commands) - 1

    for index, user_cmd in enumerate(commands):
        read_fd, write_fd = os.pipe() if index != last else (None, None)
        sys.stdout.flush()
        sys.stderr.flush()
        pid = os.fork()
        if pid == 0:
            code = 1
            try:
                try:
                    os.setpgid(0, 0 if pgid is None else pgid)
                except OSError:
                    pass
                if input_fd != 0:
                    os.dup2(input_fd, 0)
                    os.close(input_fd)
                if write_fd is not None:
                    os.dup2(write_fd, 1)
                    os.close(write_fd)
                    os.close(read_fd)
                code = _run_child(user_cmd, search_paths)
            except SystemExit as exc:
                code = exc.code if isinstance(exc.code, int) else 1
            except BaseException:
                code = 1
            finally:
                os._exit(code)

        try:
            os.setpgid(pid, pid if pgid is None else pgid)
        except OSError:
            pass
        if pgid is None:
            pgid = pid
        if write_fd is not None:
            os.close(write_fd)
        if input_fd != 0:
            os.close(input_fd)
        input_fd = read_fd if read_fd is not None else 0
        pids.append(pid)

    codes: list[int | None] = []
    for pid in pids:
        _, status = os.waitpid(pid, os.WUNTRACED)
        codes.append(None if os.WIFSTOPPED(status) else os.waitstatus_to_exitcode(status))
    return codes


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shell; returns 0 at end of input."""
    parser = argparse.ArgumentParser(prog="rune")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG)
    options = parser.parse_args(argv)
    search_paths = load_paths(options.config)

    while True:
        os.write(1, PROMPT)
        line = read_line_from_fd(0)
        if line is None:
            os.write(1, b"\n")
            return 0
        line = line.strip()
        if not line:
            continue
        segments = split_pipeline(line)
        try:
            if len(segments) > 1:
                run_pipeline(segments, search_paths)
            else:
                run(line, search_paths)
        except ValueError as exc:
            print(f"rune: {exc}", file=sys.stderr, flush=True)


if __name__ == "__main__":
    raise SystemExit(main())