import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string_and_code():
    stream = io.StringIO()
    put_char("a", stream)
    put_char(ord("b"), stream)
    assert stream.getvalue() == "ab"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    stream = io.StringIO()
    put_str("hello", stream)
    put_str("", stream)
    assert stream.getvalue() == "hello"


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("line", stream)
    assert stream.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 9, 10, -1, -2147483648, 2147483647])
def test_put_nbr_round_trip(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n


def test_put_nbr_negative_has_sign():
    stream = io.StringIO()
    put_nbr(-42, stream)
    assert stream.getvalue() == "-42"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())