import pytest

from ftkit.splitting import split, strtrim


def test_split_sentence_from_source():
    words = split("ola eu sou o bruno", " ")
    assert words == ["ola", "eu", "sou", "o", "bruno"]


def test_split_collapses_repeated_and_edge_separators():
    assert split("  ola   eu  ", " ") == ["ola", "eu"]


def test_split_single_character_words():
    assert split("a b", " ") == ["a", "b"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split(",,,", ",") == []


def test_split_without_separator_returns_whole_string():
    assert split("bruno", " ") == ["bruno"]


def test_split_words_never_contain_separator():
    words = split("x,,yy,zzz,", ",")
    assert all("," not in word and word for word in words)
    assert ",".join(words) == "x,yy,zzz"


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xx-hello-xx", "x-") == "hello"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim(" bruno ", "") == " bruno "


def test_strtrim_result_ends_are_outside_set():
    result = strtrim("..,ola eu,..", ".,")
    assert result == "ola eu"
    assert result[0] not in ".," and result[-1] not in ".,"