"""Small text helpers: word splitting, integer parsing and line reading."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

READ_SIZE = 1024

_ATOI_SPACE = " \t\n\v\f\r"


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    stripped = text.lstrip(_ATOI_SPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield lines from *stream*, each with its trailing newline if present.

    Works on text and binary streams alike; the stream is read in chunks.
    A final line without a newline is yielded as is; nothing is yielded
    for an empty trailing remainder.
    """
    pending = None
    newline = None
    while True:
        chunk = stream.read(READ_SIZE)
        if pending is None:
            pending = chunk[:0]
            newline = "\n" if isinstance(chunk, str) else b"\n"
        if not chunk:
            break
        pending += chunk
        while True:
            cut = pending.find(newline)
            if cut < 0:
                break
            yield pending[: cut + 1]
            pending = pending[cut + 1 :]
    if pending:
        yield pending