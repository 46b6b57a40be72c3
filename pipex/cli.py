"""Run two shell-free commands joined by a pipe between an input and an output file.

Usage: ``pipex infile "cmd1 args" "cmd2 args" outfile``, which behaves like
``< infile cmd1 args | cmd2 args > outfile``.
"""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from .textutils import Environment, getenv, split_on, split_space

COMMAND_NOT_FOUND = 127
_OUTPUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTPUT_MODE = 0o644

_Started = Union[subprocess.Popen, int]


class PipexError(Exception):
    """A failure that ends the program with ``status`` after printing ``message``."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def check_args(argv: Sequence[str], env: Optional[Environment]) -> str:
    """Validate the four arguments and return the command search path."""
    args = list(argv)
    if len(args) != 4:
        raise PipexError("argc")
    if not args[1] or not args[2]:
        raise PipexError("empty")
    search_path = getenv("PATH", env)
    if search_path is None:
        raise PipexError("env")
    return search_path


def find_command(name: str, search_path: str) -> str:
    """Return the first ``dir/name`` on the search path that exists and is executable."""
    for directory in split_on(search_path, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    raise PipexError("command not found", COMMAND_NOT_FOUND)


def _report(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _report_os_error(label: str, exc: OSError) -> None:
    _report(f"{label}: {exc.strerror or exc}")


def _environment(env: Optional[Environment]) -> dict[str, str]:
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep:
            result.setdefault(name, value)
    return result


def _spawn(
    command: str, search_path: str, env: dict[str, str], stdin: int, stdout: int
) -> _Started:
    """Start one command, or report why it could not start and return its status."""
    words = split_space(command)
    try:
        path = find_command(words[0] if words else "", search_path)
    except PipexError as exc:
        _report(exc.message)
        return exc.status
    if not words:
        _report_os_error("execve", OSError(errno.EACCES, os.strerror(errno.EACCES)))
        return 1
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=env
        )
    except OSError as exc:
        _report_os_error("execve", exc)
        return 1


def _start_reader(
    infile: str, command: str, search_path: str, env: dict[str, str], pipe_out: int
) -> _Started:
    try:
        source = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report_os_error("file", exc)
        return 1
    try:
        return _spawn(command, search_path, env, source, pipe_out)
    finally:
        os.close(source)


def _start_writer(
    outfile: str, command: str, search_path: str, env: dict[str, str], pipe_in: int
) -> _Started:
    try:
        sink = os.open(outfile, _OUTPUT_FLAGS, _OUTPUT_MODE)
    except OSError as exc:
        _report_os_error("file", exc)
        return 1
    try:
        return _spawn(command, search_path, env, pipe_in, sink)
    finally:
        os.close(sink)


def _wait(started: _Started) -> int:
    if isinstance(started, int):
        return started
    return started.wait()


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> int:
    """Run ``first`` reading ``infile`` piped into ``second`` writing ``outfile``.

    Returns the exit status of the second command, or 0 if it was killed by a
    signal. Failures of either side are reported on stderr.
    """
    environ = _environment(env)
    search_path = environ.get("PATH")
    if search_path is None:
        raise PipexError("env")
    read_end, write_end = os.pipe()
    try:
        reader = _start_reader(infile, first, search_path, environ, write_end)
        writer = _start_writer(outfile, second, search_path, environ, read_end)
    finally:
        os.close(read_end)
        os.close(write_end)
    _wait(reader)
    status = _wait(writer)
    return status if status >= 0 else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: validate the arguments, run the pipeline, return its status."""
    args = sys.argv[1:] if argv is None else list(argv)
    env = dict(os.environ)
    try:
        check_args(args, env)
        infile, first, second, outfile = args
        return run_pipeline(infile, first, second, outfile, env)
    except PipexError as exc:
        _report(exc.message)
        return exc.status


if __name__ == "__main__":
    sys.exit(main())