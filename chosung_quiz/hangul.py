"""Initial-consonant (chosung) extraction for Hangul syllable blocks."""

from __future__ import annotations

HANGUL_START = 0xAC00
HANGUL_END = 0xD7A3

# 21 medial vowels * 28 finals per initial consonant.
SYLLABLES_PER_CHOSUNG = 588

CHOSUNG_LIST = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)


def is_hangul_syllable(char: str) -> bool:
    return len(char) == 1 and HANGUL_START <= ord(char) <= HANGUL_END


def get_chosung(text: str) -> list[str]:
    """Return the initial consonant of every Hangul syllable in `text`.

    Non-Hangul characters contribute nothing, so the result is empty when
    `text` holds no complete syllable.
    """
    result: list[str] = []
    for char in text or "":
        if is_hangul_syllable(char):
            result.append(CHOSUNG_LIST[(ord(char) - HANGUL_START) // SYLLABLES_PER_CHOSUNG])
    return result


def chosung_key(question: list[str] | tuple[str, ...]) -> str:
    return "".join(question)
