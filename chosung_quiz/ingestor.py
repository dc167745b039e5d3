"""Turn raw archive items into quiz entry candidates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

from .archive import decode_entry, iter_json_entries
from .filters import is_good_word
from .hangul import get_chosung
from .hints import extract_hint
from .models import NO_DEFINITION, QuizEntry, RawWordRecord
from .normalizer import clean_word


def ingest_record(record: RawWordRecord) -> QuizEntry | None:
    word = clean_word(record.word)
    hint = extract_hint(record)
    if not is_good_word(word, hint, record.word_unit, record.word_type):
        return None

    question = get_chosung(word)
    if not question:
        return None
    return QuizEntry(word=word, question=tuple(question), hint=hint or NO_DEFINITION)


def ingest_item(raw: Any) -> QuizEntry | None:
    record = RawWordRecord.from_item(raw)
    if record is None:
        return None
    return ingest_record(record)


def ingest_entry(name: str, data: bytes) -> list[QuizEntry]:
    """Candidates from one archive member; malformed members yield none."""
    out: list[QuizEntry] = []
    for raw in decode_entry(name, data):
        entry = ingest_item(raw)
        if entry is not None:
            out.append(entry)
    return out


def iter_candidates(zip_path: str | Path) -> Iterator[QuizEntry]:
    for name, data in iter_json_entries(zip_path):
        yield from ingest_entry(name, data)
