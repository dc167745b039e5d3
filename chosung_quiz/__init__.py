"""Core module exports for chosung_quiz."""

from .archive import ArchiveOpenError, iter_json_entries
from .curation import SeedReport, add_word, clear_pool, draw_batch, seed_pool
from .filters import is_good_word
from .hangul import get_chosung
from .hints import HintSet, extract_hint, merge_hint_text
from .ingestor import ingest_entry, iter_candidates
from .models import NO_DEFINITION, OperationResult, QuizEntry, RawSenseInfo, RawWordRecord
from .normalizer import clean_hint_text, clean_word
from .sampler import group_by_chosung, load_dictionary, sample_by_chosung
from .search import SearchResult, search_archive
from .store import FirebasePoolStore, JsonFilePoolStore, MemoryPoolStore, StoreError, build_store

__all__ = [
    "ArchiveOpenError",
    "FirebasePoolStore",
    "HintSet",
    "JsonFilePoolStore",
    "MemoryPoolStore",
    "NO_DEFINITION",
    "OperationResult",
    "QuizEntry",
    "RawSenseInfo",
    "RawWordRecord",
    "SearchResult",
    "SeedReport",
    "StoreError",
    "add_word",
    "build_store",
    "clean_hint_text",
    "clean_word",
    "clear_pool",
    "draw_batch",
    "extract_hint",
    "get_chosung",
    "group_by_chosung",
    "ingest_entry",
    "is_good_word",
    "iter_candidates",
    "iter_json_entries",
    "load_dictionary",
    "merge_hint_text",
    "sample_by_chosung",
    "search_archive",
    "seed_pool",
]
