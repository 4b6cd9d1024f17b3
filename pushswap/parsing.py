"""Checking and reading the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_ALLOWED = _DIGITS | _SIGNS | {" "}
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """Raised when the arguments do not describe a list of distinct integers."""


def parse_int(text: str) -> int:
    """Read a leading integer from *text* the way ``atoi`` does.

    Leading whitespace and one sign are accepted; reading stops at the
    first non-digit, and a text with no digits reads as 0. A value
    outside the 32-bit signed range raises :class:`InputError`.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def split_words(text: str) -> list[str]:
    """Split *text* on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def is_valid_argument(text: str) -> bool:
    """True when *text* holds only space-separated, optionally signed integers."""
    if not text or not text.strip(" "):
        return False
    for index, char in enumerate(text):
        following = text[index + 1] if index + 1 < len(text) else ""
        if char not in _ALLOWED:
            return False
        if char in _SIGNS and following not in _DIGITS:
            return False
        if char in _DIGITS and following in _SIGNS:
            return False
    return True


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the values of stack *a*, top first.

    Each argument may hold several numbers separated by spaces. Raises
    :class:`InputError` for a malformed argument, a number outside the
    32-bit signed range, or a repeated number.
    """
    values: list[int] = []
    for arg in args:
        if not is_valid_argument(arg):
            raise InputError(f"invalid argument: {arg!r}")
        values.extend(parse_int(word) for word in split_words(arg))
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values