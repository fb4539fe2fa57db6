"""Built-in commands: echo, pwd and cd."""

from __future__ import annotations

import os
import sys
from typing import IO, Optional, Sequence

from shellx.textutil import split_words


def _perror(label: str, exc: OSError) -> None:
    sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    sys.stderr.flush()


def echo(line: str, out: Optional[IO[str]] = None) -> int:
    """Print each space-separated word of *line*.

    Each word goes on its own line; with a leading ``-n`` the words are
    written back to back with no newlines.
    """
    out = sys.stdout if out is None else out
    words = split_words(line, " ")
    no_newline = bool(words) and words[0] == "-n"
    if no_newline:
        words = words[1:]
    end = "" if no_newline else "\n"
    for word in words:
        out.write(word + end)
    return 0


def pwd(out: Optional[IO[str]] = None) -> int:
    """Print the current working directory."""
    out = sys.stdout if out is None else out
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _perror("getcwd() error", exc)
        return 1
    out.write(f"{cwd}\n")
    return 0


def _go_home(home: str, out: IO[str]) -> int:
    try:
        os.chdir(home)
    except OSError as exc:
        _perror("chdir get", exc)
        return 1
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _perror("getcwd", exc)
        return 1
    out.write(f"Current working directory: {cwd}\n")
    try:
        os.chdir("minishell")
    except OSError as exc:
        _perror("chdir minishell", exc)
        return 1
    out.write(f"Current working directory: {os.getcwd()}\n")
    out.write("Changed to minishell directory\n")
    return 0


def cd(args: Sequence[str], out: Optional[IO[str]] = None) -> int:
    """Change directory according to the argument vector *args*.

    With exactly two arguments the shell goes to ``$HOME`` and then into
    its ``minishell`` subdirectory. With more, it changes to ``args[2]``
    and lists the entries of the new directory.
    """
    out = sys.stdout if out is None else out
    home = os.environ.get("HOME")
    if home is None:
        sys.stderr.write("HOME environment variable not set\n")
        sys.stderr.flush()
        return 1
    out.write(f"HOME: {home}\n")
    if len(args) < 2:
        program = args[0] if args else "cd"
        sys.stderr.write(f"Usage: {program} <directory>\n")
        sys.stderr.flush()
        return 1
    if len(args) == 2:
        return _go_home(home, out)

    try:
        os.chdir(args[2])
    except OSError as exc:
        _perror("chdir", exc)
        return 1
    try:
        path = os.getcwd()
    except OSError as exc:
        _perror("getcwd", exc)
        return 1
    try:
        entries = os.listdir(path)
    except OSError as exc:
        _perror("opendir", exc)
        return 1
    for name in [".", "..", *entries]:
        out.write(f"{name}\n")
    return 0