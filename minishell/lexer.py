"""Turning an input line into classified tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .tokenizer import tokenize


class TokenType(IntEnum):
    """Kinds of token a command line is made of."""

    GENERAL = 0
    NAME_CMD = 1
    PIPE = 2
    REDIR_IN = 3
    INFILE = 4
    HEREDOC = 5
    LIMITER = 6
    REDIR_OUT = 7
    OUTFILE = 8
    APPEND = 9


@dataclass(frozen=True)
class Token:
    """One word of the input, its position and its kind."""

    index: int
    data: str
    type: TokenType


# Checked in order: the longer operators must come before their prefixes.
_PREFIXES = (
    ("|", TokenType.PIPE),
    ("<<", TokenType.HEREDOC),
    (">>", TokenType.APPEND),
    ("<", TokenType.REDIR_IN),
    (">", TokenType.REDIR_OUT),
)


def _classify(word: str) -> TokenType:
    for prefix, kind in _PREFIXES:
        if word.startswith(prefix):
            return kind
    return TokenType.GENERAL


def lex(text: str) -> list[Token]:
    """Split ``text`` on blanks and classify every word by its leading operator."""
    return [
        Token(index, word, _classify(word))
        for index, word in enumerate(tokenize(text))
    ]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line, with their index, text and numeric kind."""
    return "".join(
        f"Token {token.index}: [{token.data}] -> Tipo {int(token.type)}\n"
        for token in tokens
    )