import pytest

from ftkit.textops import (
    compare,
    compare_n,
    find,
    find_bounded,
    index_of,
    map_indexed,
    rindex_of,
    split,
    strtrim,
    substr,
    suffix_mismatch,
)


# split

def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_empty_string():
    assert split("", " ") == []


def test_split_no_separator_present():
    assert split("abc", ",") == ["abc"]


def test_split_accepts_integer_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_words_never_contain_separator():
    words = split("x;;y;z;;;w;", ";")
    assert all(";" not in w and w for w in words)
    assert ";".join(words) == "x;y;z;w"


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_text():
    assert strtrim("", "abc") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_keeps_inner_characters():
    assert strtrim(" a b ", " ") == "a b"


# substr

def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_clipped():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_start_at_end():
    assert substr("abc", 3, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


# find_bounded

def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_find_bounded_found_within_limit():
    big = "foo bar baz"
    idx = find_bounded(big, "bar", len(big))
    assert big[idx:idx + 3] == "bar"
    assert "bar" not in big[:idx + 2]


def test_find_bounded_beyond_limit():
    big = "foo bar baz"
    assert find_bounded(big, "baz", big.index("baz") + 2) is None


def test_find_bounded_exact_limit():
    big = "foo bar baz"
    assert find_bounded(big, "baz", len(big)) == big.index("baz")


def test_find_bounded_limit_past_end():
    assert find_bounded("ab", "abc", 50) is None


# find

def test_find_empty_needle():
    assert find("abc", "") == 0


def test_find_first_occurrence():
    big = "abcabc"
    idx = find(big, "ca")
    assert big[idx:idx + 2] == "ca"
    assert "ca" not in big[:idx + 1]


def test_find_missing():
    assert find("abcdef", "xyz") is None


def test_find_needle_longer():
    assert find("ab", "abc") is None


# suffix_mismatch

def test_suffix_mismatch_matches():
    assert suffix_mismatch("map.cub", ".cub") is None


def test_suffix_mismatch_reports_position():
    big = "map.cux"
    idx = suffix_mismatch(big, ".cub")
    assert big[idx] == "x"


def test_suffix_mismatch_first_differing_char():
    big = "file.abc"
    idx = suffix_mismatch(big, ".xyz")
    assert big[idx:] == "abc"


def test_suffix_mismatch_little_longer():
    assert suffix_mismatch("ab", ".cub") == 0


def test_suffix_mismatch_empty_little():
    assert suffix_mismatch("abc", "") is None


# compare

def test_compare_equal():
    assert compare("abc", "abc") == 0


def test_compare_order():
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") > 0


def test_compare_prefix():
    assert compare("abc", "ab") > 0
    assert compare("ab", "abc") < 0


def test_compare_difference_is_char_delta():
    assert compare("a", "b") == ord("a") - ord("b")


def test_compare_antisymmetric():
    pairs = [("x", "y"), ("hello", "help"), ("", "z")]
    for a, b in pairs:
        assert compare(a, b) == -compare(b, a)


# compare_n

def test_compare_n_limited():
    assert compare_n("abcdef", "abcxyz", 3) == 0


def test_compare_n_differs_within_limit():
    assert compare_n("abcdef", "abcxyz", 4) < 0


def test_compare_n_zero():
    assert compare_n("a", "b", 0) == 0


def test_compare_n_length_difference():
    assert compare_n("abc", "ab", 10) > 0


def test_compare_n_negative_rejected():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


# index_of / rindex_of

def test_index_of_first():
    text = "banana"
    idx = index_of(text, "a")
    assert text[idx] == "a"
    assert "a" not in text[:idx]


def test_index_of_missing():
    assert index_of("banana", "z") is None


def test_index_of_nul_is_end():
    assert index_of("banana", "\0") == len("banana")


def test_rindex_of_last():
    text = "banana"
    idx = rindex_of(text, "n")
    assert text[idx] == "n"
    assert "n" not in text[idx + 1:]


def test_rindex_of_missing():
    assert rindex_of("banana", "q") is None


def test_rindex_of_nul_is_end():
    assert rindex_of("abc", 0) == len("abc")


def test_index_of_rejects_long_char():
    with pytest.raises(ValueError):
        index_of("abc", "ab")


# map_indexed

def test_map_indexed_uses_index():
    result = map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_map_indexed_identity():
    assert map_indexed("hello", lambda i, c: c) == "hello"


def test_map_indexed_empty():
    assert map_indexed("", lambda i, c: "x") == ""