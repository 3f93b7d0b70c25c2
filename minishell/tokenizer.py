"""Splitting a line into words separated by delimiter characters."""

from __future__ import annotations

from typing import Iterator

DEFAULT_DELIMITERS = " \t\n"


def tokenize(text: str, delimiters: str = DEFAULT_DELIMITERS) -> Iterator[str]:
    """Yield the maximal runs of ``text`` that contain no delimiter character.

    Runs of delimiters are collapsed, so no empty word is ever produced.
    """
    start = None
    for position, ch in enumerate(text):
        if ch in delimiters:
            if start is not None:
                yield text[start:position]
                start = None
        elif start is None:
            start = position
    if start is not None:
        yield text[start:]