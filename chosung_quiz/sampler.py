"""Chosung-balanced sampling of quiz candidates.

Picking words uniformly over-represents common initial consonants. Instead,
candidates are grouped by their chosung sequence, the groups are shuffled,
and one word is drawn from each group until the limit is reached.
"""

from __future__ import annotations

import logging
from pathlib import Path
import random
from typing import Iterable

from .ingestor import iter_candidates
from .models import QuizEntry

LOGGER = logging.getLogger(__name__)

DEFAULT_SEED_LIMIT = 7


def group_by_chosung(candidates: Iterable[QuizEntry]) -> dict[str, list[QuizEntry]]:
    groups: dict[str, list[QuizEntry]] = {}
    for entry in candidates:
        groups.setdefault(entry.chosung_key, []).append(entry)
    return groups


def sample_by_chosung(
    groups: dict[str, list[QuizEntry]],
    limit: int,
    rng: random.Random | None = None,
) -> list[QuizEntry]:
    """Pick one entry from each of up to `limit` randomly ordered groups.

    The result never revisits a group, so it holds
    `min(limit, len(groups))` entries with distinct chosung keys.
    """
    rng = rng or random.Random()
    keys = list(groups)
    rng.shuffle(keys)

    result: list[QuizEntry] = []
    for key in keys:
        if len(result) >= limit:
            break
        group = groups[key]
        if group:
            result.append(rng.choice(group))
    return result


def load_dictionary(
    zip_path: str | Path,
    limit: int = DEFAULT_SEED_LIMIT,
    rng: random.Random | None = None,
) -> list[QuizEntry]:
    """Scan the whole archive and return a chosung-balanced sample.

    Raises ArchiveOpenError when the archive cannot be opened.
    """
    groups = group_by_chosung(iter_candidates(zip_path))
    LOGGER.info(
        "Dictionary scanned: candidates=%d chosung groups=%d",
        sum(len(g) for g in groups.values()),
        len(groups),
    )
    return sample_by_chosung(groups, limit, rng=rng)
