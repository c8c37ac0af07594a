# runeshell

A small interactive shell for POSIX systems. It reads one command line at a
time, runs its built-in commands itself and starts every other command as a
child process. Commands can be chained with `|`.

## Installing

```
pip install .
```

## Running

```
runeshell [CONFIG]
```

`CONFIG` is the file that lists the directories searched for commands. It
defaults to `../rune.conf`, relative to the directory the shell is started in.
The file holds one directory per line:

```
/bin
/usr/bin
/usr/local/bin
```

The shell shows the prompt `RuneShell $ ` and reads a line. Empty lines are
ignored. At end of input (Ctrl-D on an empty line) it prints a newline and
exits with status 0.

### Built-in commands

| Command     | What it does                                                           |
|-------------|------------------------------------------------------------------------|
| `cd [dir]`  | Change directory; with no argument goes to `$HOME`, or `/` if unset    |
| `pwd`       | Print the current directory                                            |
| `echo [-n]` | Print the arguments separated by spaces; leading `-n` drops the newline |
| `exit [n]`  | Leave the shell with status `n` (0 when missing or not a 32-bit integer) |

When `cd` fails it prints `failed to change directories!` followed by
`cd <dir> : <reason>`.

### External commands

Any other command is looked up in the configured directories, in order, and
the first regular file with an execute bit set is run. A command containing
`/` is taken as a path and run directly if it is such a file. When nothing is
found the shell prints `rune command not found: <cmd>`. A single command runs
in the foreground and the shell waits for it.

### Pipelines

```
RuneShell $ ls -l | grep py | wc -l
```

Each stage runs in its own process, and all stages are put in one process
group led by the first. Built-in commands may appear in a pipeline too; there
they run in the stage's child process, so `cd` or `exit` in a pipeline does
not affect the shell itself. An empty stage (as in `ls ||wc`) is reported on
standard error and the line is skipped.

## What it does not do

Arguments are split on whitespace only. There is no quoting or escaping, no
globbing, no `<`/`>` redirection, no variable expansion, no `;` or `&&`, no
background jobs or job control (`fg`, `bg`, `jobs`), no command history and no
line editing. The search path comes only from the configuration file, not from
`$PATH`; the shell does not start without that file.

## Using it as a library

```python
from runeshell.parser import parse
from runeshell.dispatcher import find_command, is_builtin
from runeshell.shell import split_pipeline

command = parse("ls -l /tmp")
assert command.cmd == "ls"
assert command.args == ["-l", "/tmp"]
assert parse("   ") is None

is_builtin("cd")                          # True
find_command("ls", ["/bin", "/usr/bin"])  # Path to ls, or None

split_pipeline("ls -l | wc -l")           # ["ls -l", "wc -l"]
```

The modules:

- `runeshell.parser` — `UserCommand` (fields `cmd` and `args`), `parse(line)`
  and `read_line_from_fd(fd)`, which reads one line from a raw file descriptor
  and returns `None` at end of input.
- `runeshell.dispatcher` — `is_builtin(cmd)`, `run_builtin(cmd, args,
  input_fd, output_fd)` (`exit` raises `SystemExit`), `builtin_echo(args,
  out)`, `load_paths(conf_path)`, `is_executable(path)`,
  `find_command(cmd, search_paths)` and `exec_external(cmd, args, input_fd,
  output_fd)`, which replaces the current process and never returns.
- `runeshell.shell` — `run(line, search_paths)` returns an external command's
  exit code (or `None`), `run_pipeline(segments, search_paths)` returns each
  stage's exit code (`None` for a stage that stopped), `split_pipeline(line)`
  and `main(argv)`, the interactive loop. `python -m runeshell.shell` starts
  it as well.

## Running the tests

```
pip install .[test]
pytest
```