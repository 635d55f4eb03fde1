import pytest

from cubmap.ft.transform import (
    atoi,
    count_words,
    itoa,
    split,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncpy,
    strndup,
    strsjoin,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+42") == 42


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_split_source_example():
    assert split("aa ", " ") == ["aa"]


@pytest.mark.parametrize("s", ["a,b,,c", ",,x,,", "one", "a,b,c,"])
def test_split_invariants(s):
    parts = split(s, ",")
    assert len(parts) == count_words(s, ",")
    assert "".join(parts) == s.replace(",", "")
    assert all(parts)


def test_split_empty_gives_none():
    assert split("", ",") is None


def test_count_words_only_separators():
    assert count_words(",,,", ",") == 0


def test_strdup():
    assert strdup("cub3D") == "cub3D"
    assert strdup(None) is None
    assert strdup("ab\0cd") == "ab"


def test_striteri_modifies_in_place():
    buf = list("abc")

    def upper(i, seq):
        seq[i] = seq[i].upper()

    striteri(buf, upper)
    assert buf == list("ABC")


def test_striteri_records_indices_and_stops_at_nul():
    seen = []
    striteri(list("ab\0c"), lambda i, seq: seen.append(i))
    assert seen == [0, 1]


def test_strjoin_and_strsjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") is None
    assert strsjoin("foo", "bar", "/") == "foo/bar"
    assert strsjoin("foo", None, "/") is None


@pytest.mark.parametrize("size", [1, 2, 5, 6, 10])
def test_strlcpy(size):
    src = "hello"
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert copied == src[:size - 1]


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)


def test_strlcat_truncates():
    text, total = strlcat("ab", "cdef", 4)
    assert text == "ab" + "c"
    assert total == len("ab") + len("cdef")


def test_strlcat_dst_fills_buffer():
    assert strlcat("abcd", "xy", 3) == ("abcd", 3 + 2)
    assert strlcat("abcd", "xy", 0) == ("abcd", 2)


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("abc", lambda i, ch: str(i)) == "012"
    assert strmapi(None, lambda i, ch: ch) is None


def test_strncpy_pads_and_truncates():
    padded = strncpy("ab", 5)
    assert len(padded) == 5
    assert padded.startswith("ab")
    assert padded[2:] == "\0" * 3
    assert strncpy("abcdef", 3) == "abc"


def test_strndup():
    assert strndup("hello", 2) == "he"
    assert strndup("hi", 10) == "hi"
    with pytest.raises(ValueError):
        strndup("hi", -1)


def test_strtrim():
    assert strtrim("  path.xpm \t\r\n", " \t\r\n") == "path.xpm"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim(None, " ") is None


def test_substr():
    s = "textures/north.xpm"
    assert substr(s, 9, 5) == s[9:14]
    assert substr(s, 9, 100) == s[9:]
    assert substr(s, len(s), 3) == ""
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr(s, -1, 2)