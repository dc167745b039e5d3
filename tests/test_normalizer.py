from __future__ import annotations

from chosung_quiz.normalizer import clean_hint_text, clean_word


def test_clean_word_keeps_particles_and_drops_other_groups():
    assert clean_word("가다(를)") == "가다를"
    assert clean_word("먹(을)") == "먹을"
    assert clean_word("먹(스튜)") == "먹"
    assert clean_word("  사랑(愛)  ") == "사랑"
    assert clean_word("손(을) 씻다") == "손을 씻다"


def test_clean_word_handles_empty():
    assert clean_word("") == ""
    assert clean_word("()") == ""


def test_clean_hint_text_strips_markup_ids_and_quotes():
    assert clean_hint_text("<b>깊은</b> 애정") == "깊은 애정"
    assert clean_hint_text("번호 1234567 항목") == "번호 항목"
    assert clean_hint_text("'인용' 부분만 남김") == "부분만 남김"
    assert clean_hint_text("「사전」_(예시)[주석]") == "사전 예시 주석"
    assert clean_hint_text("  여러   칸\n공백 ") == "여러 칸 공백"


def test_clean_hint_text_keeps_short_numbers():
    assert clean_hint_text("1234 년") == "1234 년"


def test_clean_hint_text_returns_empty_when_nothing_left():
    assert clean_hint_text("<i></i> 123456") == ""
