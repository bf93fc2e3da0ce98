import pytest

from ftkit.xpm import (
    XpmError,
    XpmImage,
    find_unquoted,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #00FF00",
"X c red",
// pixels
"X. ",
" .X"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tbb  c\t") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"ab" ab'
    assert find_unquoted(text, "ab") == 5


def test_find_unquoted_missing():
    assert find_unquoted('"xy"', "xy") is None


def test_find_unquoted_rejects_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_comments_keeps_length_and_quoted_text():
    text = 'a /* gone */ "/* kept */" // tail\nb'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert "tail" not in result
    assert '"/* kept */"' in result
    assert result.endswith("b")


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff8000") == 0xFF8000


def test_text_to_rgb_named_with_suffix():
    assert text_to_rgb("light", "grey") == 0xD3D3D3


def test_text_to_rgb_case_insensitive():
    assert text_to_rgb("RED") == text_to_rgb("red") == 0xFF0000


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels == (
        (0xFF0000, 0x00FF00, 0xFF000000),
        (0xFF000000, 0x00FF00, 0xFF0000),
    )


def test_parse_lines_two_chars_per_pixel():
    image = parse_xpm_lines(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image == XpmImage(width=2, height=1, pixels=((0x000002, 0x000001),))


def test_parse_lines_wide_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == ((0x000001,),)


def test_parse_lines_narrow_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == ((0x000002,),)


def test_unknown_pixel_key_gives_zero():
    image = parse_xpm_lines(["2 1 1 1", "a c #0000FF", "az"])
    assert image.pixels == ((0x0000FF, 0),)


def test_missing_rows_raise():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "a c red", "a"])


def test_zero_in_header_raises():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 1 1 1", "a c red", "a"])


def test_short_header_raises():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1"])


def test_colour_without_c_key_raises():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a s red", "a"])


def test_short_row_raises():
    with pytest.raises(XpmError):
        parse_xpm_lines(["3 1 1 1", "a c red", "aa"])


def test_load_xpm_matches_text(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")