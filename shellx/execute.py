"""Locate and run external commands, singly or as a two-stage pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Mapping, Optional, Sequence, Union

from shellx.textutil import split_words

Stream = Union[int, IO, None]


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be found on the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


def _environ(env: Optional[Mapping[str, str]]) -> dict[str, str]:
    return dict(os.environ if env is None else env)


def find_command_path(name: str, env: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the first executable ``<dir>/<name>`` on ``PATH``, or None."""
    search = _environ(env).get("PATH")
    if search is None:
        return None
    for directory in (part for part in search.split(":") if part):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def bash_command(line: Optional[str]) -> Optional[str]:
    """Rewrite ``./script args`` as ``bash script args``; other lines are unchanged."""
    if line is None or not line.startswith("./"):
        return line
    if line.startswith("./ "):
        return line
    return "bash " + line[2:]


def command_argv(line: str) -> list[str]:
    """Split a command line into its argument vector."""
    rewritten = bash_command(line)
    return split_words(rewritten, " ") if rewritten else []


def resolve_command(argv: Sequence[str], env: Optional[Mapping[str, str]]) -> str:
    """Return the executable path for ``argv[0]``.

    A name that is itself executable is used as given; otherwise ``PATH``
    is searched. Raises CommandNotFoundError when neither works.
    """
    if not argv:
        raise ValueError("empty argument vector")
    name = argv[0]
    if os.access(name, os.X_OK):
        return name
    path = find_command_path(name, env)
    if path is None:
        raise CommandNotFoundError(name)
    return path


def _spawn(
    line: str,
    env: Optional[Mapping[str, str]],
    stdin: Stream,
    stdout: Stream,
) -> Union[subprocess.Popen, int]:
    """Start *line*; return the process, or an exit status if it never started."""
    argv = command_argv(line)
    if not argv:
        return 0
    environ = _environ(env)
    try:
        path = resolve_command(argv, environ)
    except CommandNotFoundError as exc:
        sys.stderr.write(f"{exc.name}: command not found\n")
        sys.stderr.flush()
        return 127
    try:
        return subprocess.Popen(
            argv, executable=path, env=environ, stdin=stdin, stdout=stdout
        )
    except OSError as exc:
        sys.stderr.write(f"Error: {exc.strerror or exc}\n")
        sys.stderr.flush()
        return 126


def _wait(started: Union[subprocess.Popen, int]) -> int:
    """Wait for a started command and return a shell-style exit status."""
    if isinstance(started, int):
        return started
    code = started.wait()
    if code < 0:
        return 128 - code
    return code


def _flush_std() -> None:
    sys.stdout.flush()
    sys.stderr.flush()


def run_command(
    line: str,
    env: Optional[Mapping[str, str]] = None,
    stdin: Stream = None,
    stdout: Stream = None,
) -> int:
    """Run one command line and return its exit status.

    An empty line gives 0, an unknown command 127 (with a message on
    stderr), a command that cannot be started 126, and a command killed
    by a signal 128 plus the signal number.
    """
    _flush_std()
    return _wait(_spawn(line, env, stdin, stdout))


def pipex(
    infile: Union[str, os.PathLike],
    outfile: Union[str, os.PathLike],
    first: str,
    second: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``< infile first | second > outfile`` and return the second's status.

    If *infile* cannot be opened the first command does not run and the
    second reads an empty pipe. If *outfile* cannot be opened the second
    command does not run and the status is 1.
    """
    _flush_std()
    try:
        in_fd: Optional[int] = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        sys.stderr.write(f"Error: {exc.strerror}\n")
        in_fd = None
    try:
        out_fd: Optional[int] = os.open(
            outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777
        )
    except OSError as exc:
        sys.stderr.write(f"Error: {exc.strerror}\n")
        out_fd = None
    sys.stderr.flush()

    read_end, write_end = os.pipe()
    try:
        if in_fd is not None:
            first_started = _spawn(first, env, in_fd, write_end)
        else:
            first_started = 1
        os.close(write_end)
        write_end = -1
        if out_fd is not None:
            second_started = _spawn(second, env, read_end, out_fd)
        else:
            second_started = 1
        os.close(read_end)
        read_end = -1
        _wait(first_started)
        return _wait(second_started)
    finally:
        for fd in (in_fd, out_fd, read_end, write_end):
            if fd is not None and fd >= 0:
                os.close(fd)