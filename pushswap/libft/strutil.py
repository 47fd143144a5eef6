"""String helpers with C-style semantics, returning indices instead of pointers.

A search for the terminating character (``"\\0"`` or code 0) finds the
position just past the end of the string, as the C functions do.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

Char = Union[str, int]

INT_MIN = -2147483648
INT_MAX = 2147483647


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` for NUL; None if absent."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` for NUL; None if absent."""
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        left = ord(s1[index]) if index < len(s1) else 0
        right = ord(s2[index]) if index < len(s2) else 0
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """What fits of ``src`` in a buffer of ``size``, and the length of ``src``.

    With a size of 0 nothing is copied and the copy is empty.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size``.

    Returns the resulting string and the length the full result would have:
    the length of ``dst`` capped at ``size``, plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dst), size)
    if used == size:
        return dst, used + len(src)
    room = size - 1 - used
    return dst + src[:room], used + len(src)


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenation of the two strings, a missing one counting as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without the characters of ``charset`` at either end.

    A missing ``s`` gives None; a missing ``charset`` gives ``s`` unchanged.
    """
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def striteri(s: MutableSequence[Any], func: Callable[[int, MutableSequence[Any]], None]) -> None:
    """Call ``func(index, s)`` for each position of ``s``, which it may modify."""
    for index in range(len(s)):
        func(index, s)


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    if s is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(s))


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)