"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO

INT_MIN = -2147483648
INT_MAX = 2147483647


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of the 32-bit signed integer ``n``."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    stream.write(str(n))