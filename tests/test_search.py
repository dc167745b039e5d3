from __future__ import annotations

from conftest import channel, make_item

from chosung_quiz.models import NO_DEFINITION
from chosung_quiz.search import search_archive, search_records


def by_word(results):
    return {r.word: r.hint for r in results}


def test_search_merges_hints_across_entries(make_archive):
    path = make_archive(
        {
            "1.json": channel(make_item("사랑", ["깊은 애정"]), make_item("바다", ["넓은 물"])),
            "2.json": channel(make_item("사랑(을)", ["아끼는 마음", "깊은 애정"])),
            "3.json": channel(make_item("사랑", ["깊은 애정"])),
        }
    )
    results = by_word(search_archive("사랑", path))
    assert results == {
        "사랑": "깊은 애정",
        "사랑을": "1. 아끼는 마음 / 2. 깊은 애정",
    }


def test_search_renumbers_merged_fragments():
    items = [
        make_item("사과", ["과일의 하나", "사과나무의 열매"]),
        make_item("사과", ["잘못을 빎"]),
    ]
    results = by_word(search_records("사과", items))
    assert results == {"사과": "1. 과일의 하나 / 2. 사과나무의 열매 / 3. 잘못을 빎"}


def test_search_skips_quality_filter_and_uses_sentinel():
    items = [make_item("가", []), make_item("컴퓨터", ["계산기"], word_type="외래어")]
    assert by_word(search_records("가", items)) == {"가": NO_DEFINITION}
    assert by_word(search_records("컴퓨", items)) == {"컴퓨터": "계산기"}


def test_search_sentinel_replaced_by_later_hint():
    items = [make_item("나무"), make_item("나무", ["줄기가 단단한 식물"])]
    assert by_word(search_records("나무", items)) == {"나무": "줄기가 단단한 식물"}


def test_search_is_case_insensitive_on_raw_word():
    items = [make_item("CD플레이어", ["음반 재생기"], word_type="혼종어")]
    assert by_word(search_records("cd", items)) == {"CD플레이어": "음반 재생기"}


def test_blank_query_returns_nothing(make_archive):
    path = make_archive({"1.json": channel(make_item("사랑", ["깊은 애정"]))})
    assert search_archive("  ", path) == []


def test_missing_archive_returns_empty(tmp_path):
    assert search_archive("사랑", tmp_path / "nope.zip") == []


def test_result_to_dict():
    (result,) = search_records("사랑", [make_item("사랑", ["깊은 애정"])])
    assert result.to_dict() == {"word": "사랑", "hint": "깊은 애정"}
