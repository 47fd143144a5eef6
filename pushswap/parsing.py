"""Turning command-line arguments into the numbers of stack a."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _leading_number(text: str) -> int:
    """Value of the optional sign and digits after leading whitespace."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + ord(char) - ord("0")
    return sign * value


def atoi(text: str) -> int:
    """Leading integer of ``text``, wrapped to 32 bits."""
    return _wrap(_leading_number(text), 32)


def atol(text: str) -> int:
    """Leading integer of ``text``, wrapped to 64 bits."""
    return _wrap(_leading_number(text), 64)


def split_words(text: str, sep: str) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty pieces of ``text`` between occurrences of ``sep``."""
    return len(split_words(text, sep))


def is_integer_word(word: str) -> bool:
    """True for an optional minus sign followed only by digits.

    A lone minus sign is rejected; an empty word is accepted.
    """
    if word == "-":
        return False
    digits = word[1:] if word.startswith("-") else word
    return all("0" <= char <= "9" for char in digits)


def parse_numbers(words: Sequence[str]) -> list[int]:
    """Validate ``words`` and return their integer values in order."""
    if not words:
        raise ParseError("no numbers given")
    problems = []
    if not all(is_integer_word(word) for word in words):
        problems.append("not an integer")
    if any(not INT_MIN <= atol(word) <= INT_MAX for word in words):
        problems.append("out of range")
    values = [atoi(word) for word in words]
    if len(set(values)) != len(values):
        problems.append("duplicate value")
    if problems:
        raise ParseError(", ".join(problems))
    return values


def parse_args(args: Sequence[str]) -> list[int]:
    """Numbers from the program's arguments.

    A single argument holds space-separated numbers; several arguments
    hold one number each. No arguments give an empty list.
    """
    if not args:
        return []
    if len(args) == 1:
        return parse_numbers(split_words(args[0], " "))
    return parse_numbers(list(args))