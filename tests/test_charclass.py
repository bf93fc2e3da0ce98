import string

import pytest

from ftkit.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII_CHARS = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_isalpha_matches_ascii_letters(ch):
    assert isalpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_isdigit_matches_ascii_digits(ch):
    assert isdigit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_isalnum_is_union_of_alpha_and_digit(ch):
    assert isalnum(ch) == (isalpha(ch) or isdigit(ch))


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_isprint_matches_printable_without_control_whitespace(ch):
    expected = ch in string.printable and ch not in "\t\n\r\x0b\x0c"
    assert isprint(ch) == expected


def test_int_codes_are_accepted():
    assert isalpha(ord("q")) is True
    assert isdigit(ord("7")) is True
    assert isprint(127) is False
    assert isprint(32) is True


def test_non_ascii_letters_are_not_alpha():
    assert isalpha("é") is False
    assert isalnum("٣") is False
    assert isdigit("٣") is False


@pytest.mark.parametrize("code", [-1, 128, 255])
def test_isascii_bounds_outside(code):
    assert isascii(code) is False


@pytest.mark.parametrize("code", [0, 64, 127])
def test_isascii_bounds_inside(code):
    assert isascii(code) is True


def test_toupper_and_tolower_on_strings():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("!") == "!"
    assert tolower("5") == "5"


def test_case_conversion_keeps_int_type():
    assert toupper(ord("m")) == ord("M")
    assert tolower(ord("M")) == ord("m")
    assert toupper(200) == 200


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_round_trip_lowercase(ch):
    assert tolower(toupper(ch)) == ch
    assert toupper(ch) == ch.upper()


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_conversion_is_idempotent(ch):
    assert toupper(toupper(ch)) == toupper(ch)
    assert tolower(tolower(ch)) == tolower(ch)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(3.0)