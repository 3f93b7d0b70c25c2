import pytest

from minishell.textutils import (
    memchr,
    memcmp,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    s = "hola"
    i = strchr(s, "o")
    assert s[i] == "o"
    assert "o" not in s[:i]


def test_strchr_missing_and_nul():
    assert strchr("hola", "z") is None
    assert strchr("hola", "\0") == len("hola")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("hola", "ol")


def test_strrchr_finds_last_occurrence():
    s = "holoa"
    i = strrchr(s, "o")
    assert s[i] == "o"
    assert "o" not in s[i + 1:]
    assert i > strchr(s, "o")


def test_strrchr_missing_and_nul():
    assert strrchr("holoa", "x") is None
    assert strrchr("holoa", "\0") == len("holoa")


@pytest.mark.parametrize(
    "s1, s2, n, expected",
    [
        ("hola", "hola", 3, 0),
        ("", "a", 1, -1),
        ("a", "", 1, 1),
        ("", "", 3, 0),
        ("abc", "abd", 2, 0),
        ("abc", "xyz", 0, 0),
    ],
)
def test_strncmp_values(s1, s2, n, expected):
    assert strncmp(s1, s2, n) == expected


def test_strncmp_signs_and_difference():
    assert strncmp("ahola", "chol", 3) < 0
    assert strncmp("chola", "ahola", 3) > 0
    assert strncmp("hola", "adios", 3) == ord("h") - ord("a")
    assert strncmp("abcdef", "abc\xfdxx", 5) < 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_source_cases():
    big = "hola loreto que tal"
    assert strnstr(big, "lo", 4) is None
    found = strnstr(big, "lo", 15)
    assert found == big.find("lo")
    assert strnstr(big, "", 17) == 0
    assert strnstr("", "hol", 3) is None
    assert strnstr(big, "lolo", 10) is None


def test_strnstr_needs_whole_match_in_window():
    big = "hola loreto"
    pos = big.find("loreto")
    assert strnstr(big, "loreto", pos + len("loreto") - 1) is None
    assert strnstr(big, "loreto", pos + len("loreto")) == pos


def test_memchr_finds_within_limit():
    assert memchr(b"holaloreto", ord("l"), 6) == 2
    assert memchr(b"abc", ord("c"), 2) is None


def test_memchr_wraps_value():
    assert memchr(b"abc", 256 + ord("b"), 3) == memchr(b"abc", ord("b"), 3)


def test_memchr_n_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 5)


def test_memcmp_equal_and_difference():
    assert memcmp(b"hola", b"hola", 4) == 0
    assert memcmp(b"ahola", b"hola!", 5) == ord("a") - ord("h")
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_n_too_large():
    with pytest.raises(ValueError):
        memcmp(b"hola", b"hola", 6)


def test_substr_basic_and_capped():
    assert substr("hola", 2, 2) == "la"
    assert substr("hola", 1, 100) == "hola"[1:]
    assert substr("hola", 4, 2) == ""
    assert substr("hola", 10, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hola", -1, 2)


def test_strjoin_concatenates():
    result = strjoin("hola", "mundo")
    assert result.startswith("hola")
    assert result.endswith("mundo")
    assert len(result) == len("hola") + len("mundo")


def test_strtrim_source_example():
    assert strtrim("  --- Hola Mundo ---  ", " -") == "Hola Mundo"


def test_strtrim_edges():
    assert strtrim("----", "-") == ""
    assert strtrim("  a  ", "") == "  a  "
    assert strtrim("xa-bx", "x") == "a-b"


def test_split_source_example():
    assert split("hola+que+tal+estas", "+") == ["hola", "que", "tal", "estas"]


def test_split_drops_empty_pieces():
    assert split("++a++b++", "+") == ["a", "b"]
    assert split("", "+") == []
    assert split("+++", "+") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strmapi_applies_function():
    assert strmapi("hola", lambda i, c: c.upper()) == "HOLA"
    assert strmapi("abc", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) == ""


def test_strmapi_index_shift_invariant():
    s = "aBcDeF"
    result = strmapi(s, lambda i, c: chr(ord(c) + i))
    assert len(result) == len(s)
    assert all(ord(r) - ord(c) == i for i, (r, c) in enumerate(zip(result, s)))


def test_striteri_mutates_in_place():
    original = bytearray(b"aBcDeF")
    data = bytearray(original)
    striteri(data, lambda i, b: b + i)
    assert len(data) == len(original)
    assert all(new - old == i for i, (new, old) in enumerate(zip(data, original)))


def test_striteri_list_and_none():
    chars = list("hola")
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == "HOLA"
    assert striteri(None, lambda i, c: c) is None


def test_strlcpy_zero_size():
    assert strlcpy("aaa", 0) == ("", len("aaa"))


def test_strlcpy_truncates():
    text, total = strlcpy("holaaa", 4)
    assert total == len("holaaa")
    assert len(text) == 4 - 1
    assert "holaaa".startswith(text)


def test_strlcpy_fits():
    assert strlcpy("hola", 10) == ("hola", len("hola"))


def test_strlcat_source_example():
    text, total = strlcat("hola", "loreto", 6)
    assert text.startswith("hola")
    assert len(text) == 6 - 1
    assert total == len("hola") + len("loreto")


def test_strlcat_full_buffer():
    assert strlcat("hola", "xy", 3) == ("hola", len("xy") + 3)
    assert strlcat("hola", "xy", 0) == ("hola", len("xy"))


def test_strlcat_room_enough():
    assert strlcat("ab", "cd", 10) == ("abcd", len("ab") + len("cd"))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)