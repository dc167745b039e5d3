"""Quality gate deciding which dictionary words become quiz candidates."""

from __future__ import annotations

from .models import PROVERB_UNIT

STRUCTURAL_MARKERS = ("_", "^", "-")
# Hybrid words and loanwords make poor chosung puzzles.
EXCLUDED_WORD_TYPES = frozenset({"혼종어", "외래어"})

PROVERB_LENGTH = (3, 15)
WORD_LENGTH = (2, 10)


def is_good_word(word: str | None, hint: str | None, word_unit: str | None, word_type: str | None) -> bool:
    if not word:
        return False
    if any(marker in word for marker in STRUCTURAL_MARKERS):
        return False

    if word_unit == PROVERB_UNIT:
        low, high = PROVERB_LENGTH
        if not low <= len(word) <= high:
            return False
        return bool(hint)

    low, high = WORD_LENGTH
    if not low <= len(word.strip()) <= high:
        return False
    return word_type not in EXCLUDED_WORD_TYPES
