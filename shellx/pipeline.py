"""Split a command line on pipes and run its stages connected together."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional, Union

import subprocess

from shellx.execute import _spawn, _wait

SYNTAX_ERROR_STATUS = 2

_SEPARATORS = "|;"


def is_valid_pipe_syntax(line: str) -> bool:
    """Check that every ``|`` or ``;`` has a command on both sides."""
    pos = 0
    length = len(line)
    found_command = False
    while pos < length:
        while pos < length and line[pos] == " ":
            pos += 1
        if pos >= length:
            break
        char = line[pos]
        if char in _SEPARATORS:
            if not found_command:
                return False
            pos += 1
            while pos < length and line[pos] == " ":
                pos += 1
            if pos >= length or line[pos] in _SEPARATORS:
                return False
            found_command = False
        else:
            found_command = True
            pos += 1
    return True


def count_pipes(line: str) -> int:
    """Return the number of ``|`` characters in *line*."""
    return line.count("|")


def get_command(line: str, position: int) -> Optional[str]:
    """Return the pipeline stage at *position*, trimmed of spaces and tabs.

    Returns None when nothing follows the given number of pipes.
    """
    parts = line.split("|")
    index = max(position, 0)
    if index >= len(parts):
        return None
    segment = parts[index].lstrip(" \t")
    if not segment and index == len(parts) - 1:
        return None
    return segment.rstrip(" \t")


def run_pipeline(line: str, env: Optional[Mapping[str, str]] = None) -> int:
    """Run every stage of *line* with pipes between them.

    Standard input of the first stage and standard output of the last are
    inherited. All stages are waited for; the last stage's status is
    returned. A syntax error is reported on stdout and gives status 2.
    """
    if not is_valid_pipe_syntax(line):
        print("Error: Invalid pipe or semicolon syntax")
        sys.stdout.flush()
        return SYNTAX_ERROR_STATUS

    sys.stdout.flush()
    sys.stderr.flush()
    stages = count_pipes(line) + 1
    started: list[Union[subprocess.Popen, int]] = []
    prev_read: Optional[int] = None
    try:
        for index in range(stages):
            last = index == stages - 1
            read_end, write_end = (None, None) if last else os.pipe()
            command = get_command(line, index)
            try:
                if command is None:
                    started.append(1)
                else:
                    started.append(_spawn(command, env, prev_read, write_end))
            finally:
                if write_end is not None:
                    os.close(write_end)
                if prev_read is not None:
                    os.close(prev_read)
                prev_read = read_end
    finally:
        if prev_read is not None:
            os.close(prev_read)
    statuses = [_wait(item) for item in started]
    return statuses[-1]