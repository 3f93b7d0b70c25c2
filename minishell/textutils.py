"""String and byte helpers: searching, comparing, slicing, joining and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple


def _single_char(c: str, name: str = "c") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields the index just past the end.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference of the first mismatching pair, -1 or 1 when
    one string ends before the other within the limit, and 0 otherwise.
    """
    _non_negative(n, "n")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    stop = min(len(s1), len(s2), n)
    if stop < n:
        if len(s1) == stop and len(s2) > stop:
            return -1
        if len(s1) > stop and len(s2) == stop:
            return 1
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big`` when it lies wholly within the first
    ``length`` characters, or None. An empty ``little`` is found at 0."""
    _non_negative(length, "length")
    if not little:
        return 0
    width = len(little)
    for start in range(len(big)):
        if start + width > length:
            break
        if big.startswith(little, start):
            return start
    return None


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (taken modulo 256) within the
    first ``n`` bytes of ``data``, or None."""
    _non_negative(n, "n")
    if n > len(data):
        raise ValueError("n exceeds the length of data")
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    mismatching pair, or 0 when they match."""
    _non_negative(n, "n")
    if n > len(a) or n > len(b):
        raise ValueError("n exceeds the length of the data")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "sep")
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    if s is None:
        return ""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: Optional[MutableSequence], func: Callable[[int, object], object]) -> None:
    """Replace every element of ``s`` in place with ``func(index, element)``."""
    if s is None:
        return
    for index, item in enumerate(list(s)):
        s[index] = func(index, item)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had; when ``dst`` already fills the buffer it is returned unchanged
    along with ``len(src) + size``.
    """
    _non_negative(size, "size")
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)