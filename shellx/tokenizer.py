"""Split a command line into words, pipes and redirections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_METACHARS = "|<>"
_QUOTES = "\"'"


class TokenType(IntEnum):
    """Kind of a lexical token."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    HEREDOC = 4
    APPEND = 5


_OPERATORS = {
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
    "|": TokenType.PIPE,
}


@dataclass(frozen=True)
class Token:
    """A single token of a command line."""

    value: str
    type: TokenType


def tokenize(text: str) -> list[Token]:
    """Tokenize *text* into a list of tokens.

    Tokens are separated by spaces. A quoted section becomes a single word
    without its quotes; an unterminated quote runs to the end of the line.
    ``<<`` and ``>>`` are recognised before the single-character operators.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        while pos < length and text[pos] == " ":
            pos += 1
        if pos >= length:
            break
        char = text[pos]
        if char in _QUOTES:
            end = text.find(char, pos + 1)
            if end < 0:
                tokens.append(Token(text[pos + 1 :], TokenType.WORD))
                pos = length
            else:
                tokens.append(Token(text[pos + 1 : end], TokenType.WORD))
                pos = end + 1
        elif text.startswith(("<<", ">>"), pos):
            op = text[pos : pos + 2]
            tokens.append(Token(op, _OPERATORS[op]))
            pos += 2
        elif char in _METACHARS:
            tokens.append(Token(char, _OPERATORS[char]))
            pos += 1
        else:
            start = pos
            while pos < length and text[pos] not in _METACHARS + _QUOTES + " ":
                pos += 1
            tokens.append(Token(text[start:pos], TokenType.WORD))
    return tokens