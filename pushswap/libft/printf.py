"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _wrap(value: int, bits: int, signed: bool) -> int:
    modulus = 1 << bits
    value %= modulus
    if signed and value >= modulus >> 1:
        value -= modulus
    return value


def _hex(value: int, digits: str) -> str:
    text = ""
    while True:
        text = digits[value % 16] + text
        value //= 16
        if value == 0:
            return text


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError("%c expects a single character")
            return arg
        return chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_wrap(int(arg), 32, signed=True))
    if spec == "u":
        return str(_wrap(int(arg), 32, signed=False))
    if spec == "x":
        return _hex(_wrap(int(arg), 32, signed=False), _HEX_LOWER)
    if spec == "X":
        return _hex(_wrap(int(arg), 32, signed=False), _HEX_UPPER)
    address = 0 if arg is None else _wrap(int(arg), 64, signed=False)
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, _HEX_LOWER)


def render(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``.

    Unknown conversions and a trailing lone ``%`` produce nothing.
    Raises ValueError when there are fewer arguments than conversions.
    """
    remaining = iter(args)
    parts = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            spec = next(chars, None)
            if spec is not None:
                parts.append(_convert(spec, remaining))
        else:
            parts.append(char)
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)