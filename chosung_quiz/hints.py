"""Definition hints: extraction from dictionary senses and numbered rendering.

A record may carry many senses. Accepted definitions are kept as an ordered
collection of fragments and only turned into the display form
``"1. first / 2. second"`` (or the bare fragment when there is just one)
when a result leaves this package.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from .models import RawWordRecord
from .normalizer import clean_hint_text

LOGGER = logging.getLogger(__name__)

SEPARATOR = " / "
PROVERB_PREFIX = "속담: "
NUMBERING_RE = re.compile(r"^\d+\.\s+")
DIGITS_RE = re.compile(r"^[0-9]+$")

PROVERB_HINT_LENGTH = (5, 200)
WORD_HINT_LENGTH = (1, 160)


def render_hints(fragments: Iterable[str]) -> str | None:
    items = list(fragments)
    if not items:
        return None
    if len(items) == 1:
        return items[0]
    return SEPARATOR.join(f"{i}. {text}" for i, text in enumerate(items, start=1))


class HintSet:
    """Insertion-ordered set of hint fragments."""

    def __init__(self, fragments: Iterable[str] = ()) -> None:
        self._fragments: dict[str, None] = {}
        self.update(fragments)

    @classmethod
    def parse(cls, text: str | None) -> HintSet:
        """Split a rendered hint back into fragments, dropping old numbering."""
        if not text:
            return cls()
        return cls(NUMBERING_RE.sub("", part).strip() for part in text.split(SEPARATOR))

    def add(self, fragment: str) -> bool:
        if not fragment or fragment in self._fragments:
            return False
        self._fragments[fragment] = None
        return True

    def update(self, fragments: Iterable[str]) -> None:
        for fragment in fragments:
            self.add(fragment)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __contains__(self, fragment: object) -> bool:
        return fragment in self._fragments

    def render(self) -> str | None:
        return render_hints(self._fragments)


def merge_hint_text(existing: str | None, new: str | None) -> str | None:
    """Union two rendered hints and renumber the result."""
    merged = HintSet.parse(existing)
    merged.update(HintSet.parse(new))
    return merged.render()


def _proverb_hints(record: RawWordRecord) -> list[str]:
    low, high = PROVERB_HINT_LENGTH
    hints: list[str] = []
    for sense in record.senses:
        raw = sense.definition or sense.definition_original
        if not raw:
            continue
        text = clean_hint_text(raw)
        if low <= len(text) <= high:
            hints.append(PROVERB_PREFIX + text)
    return hints


def _word_hints(record: RawWordRecord) -> list[str]:
    low, high = WORD_HINT_LENGTH
    hints = HintSet()
    for sense in record.senses:
        if not sense.definition_original:
            continue
        text = clean_hint_text(sense.definition_original)
        if not low <= len(text) <= high:
            continue
        if DIGITS_RE.match(text) or "<" in text or ">" in text:
            continue
        hints.add(text)
    return list(hints)


def collect_hints(record: RawWordRecord) -> list[str]:
    """Return the accepted hint fragments of a record in sense order.

    Proverbs prefer the paraphrased `definition` and allow longer text;
    ordinary words use `definition_original` only, deduplicated.
    """
    hints = _proverb_hints(record) if record.is_proverb else _word_hints(record)
    LOGGER.debug("[%s] hints found: %d", record.word, len(hints))
    return hints


def extract_hint(record: RawWordRecord) -> str | None:
    return render_hints(collect_hints(record))
