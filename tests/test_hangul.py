from __future__ import annotations

import pytest

from chosung_quiz.hangul import CHOSUNG_LIST, chosung_key, get_chosung


def test_chosung_table_has_nineteen_consonants():
    assert len(CHOSUNG_LIST) == 19


@pytest.mark.parametrize(
    "text, expected",
    [
        ("사랑", ["ㅅ", "ㅇ"]),
        ("가", ["ㄱ"]),
        ("힣", ["ㅎ"]),
        ("까치", ["ㄲ", "ㅊ"]),
        ("손을 씻다", ["ㅅ", "ㅇ", "ㅆ", "ㄷ"]),
        ("K-팝", ["ㅍ"]),
    ],
)
def test_get_chosung(text, expected):
    assert get_chosung(text) == expected


def test_get_chosung_length_matches_syllable_count():
    word = "대한민국만세"
    assert len(get_chosung(word)) == len(word)


def test_get_chosung_is_empty_without_hangul():
    assert get_chosung("hello") == []
    assert get_chosung("ㄱㄴ") == []
    assert get_chosung("") == []


def test_chosung_key_joins_glyphs():
    assert chosung_key(["ㅅ", "ㅇ"]) == "ㅅㅇ"
