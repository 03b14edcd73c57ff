"""Small string helpers used by the map and scene readers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Text without digits gives 0. The result is
    wrapped to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(value * sign)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings, returning the difference at the first mismatch.

    Zero means the strings are equal; the end of a string compares as 0.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, left to right."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    return text.replace(old, new)


def repeat_char(char: str, size: int) -> str:
    """Build a string of ``size`` copies of ``char``."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char * max(size, 0)


def is_in(stack: str | None, char: str) -> bool:
    """Tell whether the single character ``char`` occurs in ``stack``."""
    if stack is None or len(char) != 1:
        return False
    return char in stack