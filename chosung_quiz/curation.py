"""Quiz pool curation: startup seeding, batch draws, clear and manual add.

The existence check and the write are separate store calls with no lock,
so two concurrent adds of the same word can both succeed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from pathlib import Path
import random
from zoneinfo import ZoneInfo

from .archive import ArchiveOpenError
from .hangul import get_chosung
from .models import NO_DEFINITION, OperationResult, QuizEntry
from .sampler import DEFAULT_SEED_LIMIT, load_dictionary
from .store import PoolStore, StoreError, make_store_key

LOGGER = logging.getLogger(__name__)

BATCH_SIZE = 19
DEFAULT_TIMEZONE = "Asia/Seoul"


@dataclass(frozen=True)
class SeedReport:
    existing: int
    sampled: int
    saved: int
    final: int


def now_timestamp(tz_name: str = DEFAULT_TIMEZONE) -> str:
    return datetime.now(ZoneInfo(tz_name)).isoformat()


def store_entry(store: PoolStore, entry: QuizEntry) -> str:
    key = make_store_key(entry.word)
    LOGGER.info("Saving %r (key=%s)", entry.word, key)
    store.put(key, entry)
    return key


def seed_pool(
    store: PoolStore,
    zip_path: str | Path,
    limit: int = DEFAULT_SEED_LIMIT,
    rng: random.Random | None = None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> SeedReport:
    """Append a chosung-balanced sample of archive words to the pool.

    Never updates or removes existing entries. Words already stored, or
    repeated within the sample, are skipped. A failed read of the pool
    raises StoreError; a failed write only skips that word.
    """

    existing = len(store.read_all())
    LOGGER.info("Existing pool: %d entries", existing)

    try:
        sampled = load_dictionary(zip_path, limit=limit, rng=rng)
    except ArchiveOpenError as exc:
        LOGGER.error("Dictionary load failed: %s", exc)
        sampled = []
    LOGGER.info("Sampled from archive: %d entries", len(sampled))

    saved = 0
    seen: set[str] = set()
    for entry in sampled:
        word = entry.word.strip()
        if not word or word in seen:
            continue
        seen.add(word)
        try:
            if store.find_by_word(word):
                LOGGER.info("Skip %r: already in pool", word)
                continue
            store_entry(store, entry.with_timestamp(now_timestamp(tz_name)))
        except StoreError as exc:
            LOGGER.error("Failed to seed %r: %s", word, exc)
            continue
        saved += 1

    final = len(store.read_all())
    LOGGER.info("Seeding done: saved=%d final pool=%d", saved, final)
    return SeedReport(existing=existing, sampled=len(sampled), saved=saved, final=final)


def draw_batch(store: PoolStore, size: int = BATCH_SIZE, rng: random.Random | None = None) -> list[QuizEntry]:
    """Return up to `size` random pool entries; StoreError propagates."""
    rng = rng or random.Random()
    pool = store.read_all()
    if not pool:
        LOGGER.warning("Batch requested but the pool is empty")
        return []
    shuffled = list(pool)
    rng.shuffle(shuffled)
    batch = shuffled[:size]
    LOGGER.info("Batch drawn: %d of %d entries", len(batch), len(pool))
    return batch


def clear_pool(store: PoolStore) -> OperationResult:
    LOGGER.info("Clearing the whole quiz pool")
    try:
        store.remove_all()
    except StoreError as exc:
        LOGGER.error("Clear failed: %s", exc)
        return OperationResult(success=False, message=f"Error: {exc}", kind="store")
    return OperationResult(success=True, message="Quiz pool cleared")


def add_word(
    store: PoolStore,
    word: str | None,
    hint: str | None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> OperationResult:
    """Add one word with a caller-supplied hint.

    A missing word or hint, a word without Hangul syllables, or a word that
    is already stored is rejected without touching the store. A hint made
    only of whitespace is stored as the no-definition sentinel.
    """

    LOGGER.info("Add word request: word=%r hint=%r", word, hint)
    word = (word or "").strip()
    if not word or not hint:
        return OperationResult(success=False, message="Both word and hint are required.", kind="validation")

    question = get_chosung(word)
    if not question:
        LOGGER.info("Chosung not computable: %r", word)
        return OperationResult(success=False, message="Cannot extract chosung from the word.", kind="validation")

    try:
        if store.find_by_word(word):
            LOGGER.info("Duplicate word: %r", word)
            return OperationResult(success=False, message="Word is already in the pool.", kind="duplicate")

        entry = QuizEntry(
            word=word,
            question=tuple(question),
            hint=hint.strip() or NO_DEFINITION,
            added_at=now_timestamp(tz_name),
        )
        key = store_entry(store, entry)
        total = len(store.read_all())
    except StoreError as exc:
        LOGGER.error("Add word failed: %s", exc)
        return OperationResult(success=False, message=f"Error: {exc}", kind="store")

    LOGGER.info("Added %r (pool size=%d)", word, total)
    return OperationResult(success=True, message=f"{word} added (total {total})", key=key, total=total)
