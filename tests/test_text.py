import pytest

from ftkit.text import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    substr,
)


def test_strlen_matches_len():
    for s in ["", "a", "ola eu sou o bruno"]:
        assert strlen(s) == len(s)


def test_strchr_finds_first_occurrence():
    s = "hello world"
    idx = strchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[:idx]


def test_strchr_accepts_int_code():
    s = "hello"
    assert strchr(s, ord("l")) == strchr(s, "l")


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    s = "hello"
    assert strchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strrchr_finds_last_occurrence():
    s = "hello world"
    idx = strrchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[idx + 1 :]


def test_strrchr_missing_and_nul():
    s = "abc"
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strdup_equal_copy():
    s = "copy me"
    assert strdup(s) == s
    assert strdup("") == ""


def test_striteri_keeps_none_results():
    s = "abcd"
    result = striteri(s, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert len(result) == len(s)
    assert result[1] == s[1]
    assert result[3] == s[3]
    assert result[0] == s[0].upper()


def test_striteri_passes_indices_in_order():
    seen = []
    striteri("xyz", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))


def test_strmapi_applies_function():
    s = "hello"
    assert strmapi(s, lambda i, ch: ch.upper()) == s.upper()
    assert strmapi("", lambda i, ch: ch) == ""


def test_strmapi_receives_index():
    s = "aaaa"
    result = strmapi(s, lambda i, ch: str(i))
    assert [int(ch) for ch in result] == list(range(len(s)))


def test_strjoin_concatenates():
    assert strjoin("ola ", "bruno") == "ola " + "bruno"
    assert strjoin("", "x") == "x"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_fits_and_zero_size():
    src = "hi"
    assert strlcpy(src, 10) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)


def test_strlcat_full_append():
    dst, src = "ab", "cdef"
    assert strlcat(dst, src, 10) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates_to_size():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 4)
    assert len(result) == 3
    assert result.startswith(dst)
    assert total == len(dst) + len(src)


def test_strlcat_size_not_exceeding_dst():
    dst, src = "abcd", "xy"
    assert strlcat(dst, src, 2) == (dst, len(src) + 2)
    assert strlcat(dst, src, 0) == (dst, len(src))


def test_strncmp_equal_and_zero_n():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0


def test_strncmp_antisymmetric():
    pairs = [("apple", "apply"), ("a", ""), ("zeta", "alpha")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strnstr_finds_within_limit():
    big, little = "Foo Bar Baz", "Bar"
    idx = strnstr(big, little, len(big))
    assert big[idx : idx + len(little)] == little


def test_strnstr_match_must_fit():
    big, little = "Foo Bar Baz", "Bar"
    idx = big.index(little)
    assert strnstr(big, little, idx + len(little)) == idx
    assert strnstr(big, little, idx + len(little) - 1) is None


def test_strnstr_empty_little_and_missing():
    assert strnstr("anything", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_substr_basic_and_clamped():
    s = "ola eu sou o bruno"
    assert substr(s, 4, 2) == s[4:6]
    assert substr(s, 13, 100) == s[13:]


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)