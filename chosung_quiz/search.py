"""Free-text lookup across the archive with per-word hint merging.

Search surfaces every record whose raw headword contains the query, with no
quality filtering. Records that clean to the same word are folded into one
result whose hints are the union of all their senses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Iterable

from .archive import ArchiveOpenError, iter_raw_items
from .hints import HintSet, collect_hints
from .models import NO_DEFINITION, RawWordRecord
from .normalizer import clean_word

LOGGER = logging.getLogger(__name__)


@dataclass
class SearchResult:
    word: str
    hints: HintSet = field(default_factory=HintSet)

    @property
    def hint(self) -> str:
        return self.hints.render() or NO_DEFINITION

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "hint": self.hint}


def merge_search_hit(results: dict[str, SearchResult], record: RawWordRecord) -> SearchResult:
    word = clean_word(record.word)
    result = results.get(word)
    if result is None:
        result = results[word] = SearchResult(word=word)
    result.hints.update(collect_hints(record))
    return result


def search_records(query: str, raw_items: Iterable[Any]) -> list[SearchResult]:
    needle = (query or "").strip().lower()
    if not needle:
        return []

    results: dict[str, SearchResult] = {}
    for raw in raw_items:
        record = RawWordRecord.from_item(raw)
        if record is None or needle not in record.word.lower():
            continue
        merge_search_hit(results, record)
    return list(results.values())


def search_archive(query: str, zip_path: str | Path) -> list[SearchResult]:
    """Search the archive; an unreadable archive yields no results."""
    LOGGER.info("Search request: %r", query)
    if not (query or "").strip():
        LOGGER.info("Search skipped: empty query")
        return []
    try:
        results = search_records(query, iter_raw_items(zip_path))
    except ArchiveOpenError as exc:
        LOGGER.error("Search failed: %s", exc)
        return []
    LOGGER.info("Search done: %d words", len(results))
    return results
