# pipex

`pipex` runs two commands joined by a pipe, taking input from one file and
sending output to another. It behaves like the shell line

    < infile cmd1 | cmd2 > outfile

## Installation

    pip install .

## Usage

    pipex infile "cmd1 args" "cmd2 args" outfile

For example:

    pipex input.txt "grep error" "wc -l" count.txt

Each command string is split on whitespace; there is no quoting, globbing
or variable expansion. The first word is looked up in every directory
listed in the `PATH` environment variable, and the first match that exists
and is executable is run with the remaining words as its arguments.

The output file is created if missing and truncated otherwise, with mode
`0644`.

## Errors and exit status

Before anything runs, the arguments are checked. Each of these writes a
short message to standard error and exits with status `1`:

- `argc` – there are not exactly four arguments;
- `empty` – one of the two command strings is empty;
- `env` – `PATH` is not set.

Once the pipeline starts, problems on either side are reported on standard
error and do not stop the other side:

- `file: <reason>` when the input or output file cannot be opened;
- `command not found` when a command is not on `PATH`;
- `execve: <reason>` when a command is found but cannot be started.

The exit status is that of the second side of the pipe: the second
command's own status, `127` if it was not found, `1` if the output file
could not be opened or the command could not be started, and `0` if it was
killed by a signal. A failure of the first side alone does not change the
exit status.

## Library use

The same pieces are available from Python:

```python
from pipex.cli import PipexError, check_args, find_command, run_pipeline
from pipex.textutils import getenv, split_space

find_command("ls", "/usr/bin:/bin")        # e.g. '/usr/bin/ls'
split_space("  grep   -v  foo ")           # ['grep', '-v', 'foo']
getenv("HOME", ["HOME=/home/user"])        # '/home/user'
```

- `check_args(argv, env)` validates the four arguments and returns the
  `PATH` value, raising `PipexError` otherwise.
- `find_command(name, search_path)` returns the first executable
  `dir/name`, or raises `PipexError` with `status` 127.
- `run_pipeline(infile, first, second, outfile, env=None)` runs the
  pipeline and returns the exit status described above. It raises
  `PipexError` only when `PATH` is missing from the environment; other
  failures are reported on standard error. `env` may be a mapping, a list
  of `NAME=value` strings, or `None` for the current environment.
- `main(argv=None)` is the command's entry point and returns its status.

`pipex.textutils` also holds small text helpers: C-style number parsing
(`atoi`, `atol`, `atol_checked`), `split_on`, `trim`, `find_bounded`,
`itoa`, `is_space` and a minimal printf-style formatter, `format_printf`,
supporting `%c %s %p %d %i %u %x %X`.

## Limits

Only two commands are supported, and there is no here-document mode or
appending to the output file.