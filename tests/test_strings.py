import pytest

from megalibft.strings import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_length(text):
    assert strlen(text) == len(text)


def test_strlen_of_missing_string_is_zero():
    assert strlen(None) == 0


def test_strchr_finds_first_occurrence():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_accepts_integer_code():
    text = "hello"
    assert strchr(text, ord("l")) == strchr(text, "l")


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_missing_character_and_string():
    assert strchr("hello", "z") is None
    assert strchr(None, "a") is None


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strrchr_finds_last_occurrence():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "z") is None


def test_strncmp_sign_only():
    assert strncmp("abc", "abd", 3) == -1
    assert strncmp("abd", "abc", 3) == 1
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 10) == -1
    assert strncmp("abc", "ab", 10) == 1
    assert strncmp("same", "same", 100) == 0


def test_strncmp_zero_length_is_equal():
    assert strncmp("x", "y", 0) == 0


def test_strcmp_returns_code_difference():
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp("equal", "equal") == 0


def test_strnstr_found_within_length():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_strnstr_must_fit_in_length():
    haystack = "foo bar baz"
    start = haystack.index("bar")
    assert strnstr(haystack, "bar", start + 2) is None
    assert strnstr(haystack, "bar", start + 3) == start


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strlcpy_truncates_and_reports_full_length():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_whole_and_empty_buffers():
    assert strlcpy("hello", 100) == ("hello", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy(None, 10) == ("", 0)


def test_strlcat_appends_within_size():
    dest, src = "foo", "barbaz"
    result, reported = strlcat(dest, src, 6)
    assert result == dest + src[:2]
    assert len(result) == 5
    assert reported == len(dest) + len(src)


def test_strlcat_full_buffer_leaves_dest():
    dest, src = "foobar", "baz"
    assert strlcat(dest, src, 4) == (dest, len(src) + 4)
    assert strlcat(dest, src, 0) == (dest, len(src))


def test_strlcat_large_buffer_appends_everything():
    assert strlcat("foo", "bar", 50) == ("foobar", 6)


def test_substr_ranges():
    text = "hello world"
    assert substr(text, 6, 5) == "world"
    assert substr(text, 6, 100) == text[6:]
    assert substr(text, len(text) + 1, 3) == ""
    assert substr(None, 0, 3) is None


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_variants():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("  keep inner  ", " ") == "keep inner"


def test_strtrim_all_removed_and_empty_set():
    assert strtrim("xyxy", "xy") == ""
    assert strtrim(" a ", "") == " a "
    assert strtrim(None, "x") is None
    assert strtrim("abc", None) is None


def test_split_drops_empty_pieces():
    assert split("  ls   -la  /tmp ", " ") == ["ls", "-la", "/tmp"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_uses_index_and_char():
    text = "abcd"
    result = strmapi(text, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert len(result) == len(text)
    assert result.lower() == text
    assert result[0] == "A"
    assert result[1] == "b"


def test_strmapi_missing_arguments():
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_mutates_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper() if i == 1 else None)
    assert chars == ["a", "B", "c"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")