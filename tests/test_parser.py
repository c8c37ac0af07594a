import os

import pytest

from runeshell.parser import UserCommand, parse, read_line_from_fd


def test_parse_documented_example():
    cmd = parse("ls -l /tmp")
    assert cmd == UserCommand("ls", ["-l", "/tmp"])


def test_parse_collapses_whitespace():
    cmd = parse("  echo\t a   b  ")
    assert cmd.cmd == "echo"
    assert cmd.args == ["a", "b"]


def test_parse_command_without_arguments():
    assert parse("pwd") == UserCommand("pwd", [])


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_parse_blank_returns_none(line):
    assert parse(line) is None


def test_parse_round_trip():
    line = "grep -r pattern dir"
    cmd = parse(line)
    assert " ".join([cmd.cmd, *cmd.args]) == line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


def test_read_line_splits_on_newline():
    fd = _pipe_with(b"first\nsecond")
    try:
        assert read_line_from_fd(fd) == "first"
        assert read_line_from_fd(fd) == "second"
        assert read_line_from_fd(fd) is None
    finally:
        os.close(fd)


def test_read_line_empty_line_is_not_eof():
    fd = _pipe_with(b"\nafter\n")
    try:
        assert read_line_from_fd(fd) == ""
        assert read_line_from_fd(fd) == "after"
        assert read_line_from_fd(fd) is None
    finally:
        os.close(fd)


def test_read_line_replaces_invalid_utf8():
    fd = _pipe_with(b"a\xffb\n")
    try:
        assert read_line_from_fd(fd) == "a\ufffdb"
    finally:
        os.close(fd)


def test_read_line_bad_fd_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        read_line_from_fd(read_fd)