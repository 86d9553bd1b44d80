"""ASCII character classification, case mapping and raw byte comparison."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]

_DIGITS = range(ord("0"), ord("9") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single-character str, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a single-character str, not {type(c).__name__}")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    code = _code(c)
    return code in _DIGITS or code in _LOWER or code in _UPPER


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _map_case(c: CharLike, source: range, offset: int) -> CharLike:
    code = _code(c)
    if code in source:
        code += offset
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same kind (int or str) as the argument.
    """
    return _map_case(c, _UPPER, _CASE_OFFSET)


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same kind (int or str) as the argument.
    """
    return _map_case(c, _LOWER, -_CASE_OFFSET)


def _check_span(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memchr(data: BytesLike, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is reduced to an unsigned byte first. Returns None when it is
    not found.
    """
    _check_span(n, data)
    target = value & 0xFF
    return next((index for index, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first differing pair of bytes, or 0 when
    the spans are equal.
    """
    _check_span(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0