"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer character
code. Classification functions return a bool. The case conversions return
a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if not c:
            raise ValueError("expected a character, got an empty string")
        return ord(c[0])
    return int(c)


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0 to 9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalpha(c: Char) -> bool:
    """True for the ASCII letters a to z and A to Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def islower(c: Char) -> bool:
    """True when the (first) character is an ASCII lower-case letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z")


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code