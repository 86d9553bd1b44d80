import pytest

from fractol.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    memchr,
    memcmp,
    tolower,
    toupper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_classification_agrees_with_ascii_str_methods(code):
    ch = chr(code)
    assert isalpha(code) == ch.isalpha()
    assert isdigit(code) == ch.isdigit()
    assert isalnum(code) == ch.isalnum()
    assert isprint(code) == (ch.isprintable() and ch not in "\t\n\r\x0b\x0c")


def test_classification_accepts_strings():
    assert isalpha("q")
    assert isdigit("7")
    assert isalnum("Z")
    assert not isalnum("-")
    assert isprint(" ")
    assert not isprint("\n")


@pytest.mark.parametrize("code", [128, 200, 255, 0xE9, 0x3B1])
def test_non_ascii_codes_are_not_letters(code):
    assert not isalpha(code)
    assert not isalnum(code)
    assert not isdigit(code)
    assert not isascii(code)
    assert not isprint(code)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(-1)
    assert not isascii(128)


def test_isprint_bounds():
    assert not isprint(31)
    assert isprint(32)
    assert isprint(126)
    assert not isprint(127)


@pytest.mark.parametrize("code", ASCII)
def test_case_mapping_matches_ascii_str_methods(code):
    ch = chr(code)
    assert tolower(code) == ord(ch.lower())
    assert toupper(code) == ord(ch.upper())


@pytest.mark.parametrize("ch", "abcxyzABCXYZ")
def test_case_round_trip_on_strings(ch):
    assert tolower(toupper(ch)) == ch.lower()
    assert toupper(tolower(ch)) == ch.upper()
    assert isinstance(tolower(ch), str)


@pytest.mark.parametrize("code", [200, 0xC9, -5, 1000])
def test_case_mapping_leaves_other_codes(code):
    assert tolower(code) == code
    assert toupper(code) == code


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_string_rejected(bad):
    with pytest.raises(ValueError):
        isalpha(bad)


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == 2


def test_memchr_respects_limit():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), len(data)) == data.index(b"e")


def test_memchr_reduces_value_to_byte():
    data = bytes([1, 2, 0x41, 4])
    assert memchr(data, 0x141, len(data)) == memchr(data, 0x41, len(data))
    assert memchr(bytearray(b"\xff"), -1, 1) == 0


def test_memchr_zero_length():
    assert memchr(b"abc", ord("a"), 0) is None


def test_memchr_rejects_overlong_count():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 3)


def test_memcmp_equal_spans():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) > 0
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0
    assert memcmp(b"\x00", b"\xff", 1) == -255


def test_memcmp_rejects_bad_count():
    with pytest.raises(ValueError):
        memcmp(b"abc", b"ab", 3)
    with pytest.raises(ValueError):
        memcmp(b"abc", b"abc", -1)