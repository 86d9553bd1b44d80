"""String helpers: integer parsing and formatting, splitting, trimming and searching."""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterator, Union

CharLike = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _char(c: CharLike) -> str:
    """Return a one-character string for a character given as an int code or a str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single-character str, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a single-character str, not {type(c).__name__}")


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty words."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start past the end of the text gives an empty string.
    """
    _require_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _require_non_negative(length=length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def _codes(text: str) -> Iterator[int]:
    """Yield character codes followed by a terminating zero."""
    return chain(map(ord, text), (0,))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, where
    the end of a string counts as code 0, or 0 when the spans are equal.
    """
    _require_non_negative(n=n)
    for left, right in islice(zip(_codes(s1), _codes(s2)), n):
        if left != right or left == 0:
            return left - right
    return 0


def strchr(text: str, char: CharLike) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    Searching for NUL gives the length of the text; a missing character
    gives None.
    """
    target = _char(char)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    Searching for NUL gives the length of the text; a missing character
    gives None.
    """
    target = _char(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index