"""Data shapes shared by the ingestion, search and pool layers.

Raw records mirror the dictionary archive layout
(`channel.item[].word_info.pos_info[].comm_pattern_info[].sense_info[]`).
Quiz entries mirror what is written to the pool store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .hangul import chosung_key

NO_DEFINITION = "정의 없음"
PROVERB_UNIT = "속담"


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class RawSenseInfo:
    definition: str | None = None
    definition_original: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> RawSenseInfo:
        if not isinstance(raw, dict):
            return cls()
        return cls(
            definition=_as_text(raw.get("definition")),
            definition_original=_as_text(raw.get("definition_original")),
        )


@dataclass(frozen=True)
class RawWordRecord:
    """One `channel.item[]` element, with senses flattened in document order."""

    word: str
    word_unit: str = ""
    word_type: str = ""
    senses: tuple[RawSenseInfo, ...] = ()

    @property
    def is_proverb(self) -> bool:
        return self.word_unit == PROVERB_UNIT

    @classmethod
    def from_item(cls, raw: Any) -> RawWordRecord | None:
        """Build a record from a raw archive item; None when it has no word."""
        if not isinstance(raw, dict):
            return None
        info = raw.get("word_info")
        if not isinstance(info, dict):
            return None
        word = _as_text(info.get("word"))
        if word is None:
            return None

        senses: list[RawSenseInfo] = []
        for pos in _as_list(info.get("pos_info")):
            if not isinstance(pos, dict):
                continue
            for comm in _as_list(pos.get("comm_pattern_info")):
                if not isinstance(comm, dict):
                    continue
                for sense in _as_list(comm.get("sense_info")):
                    senses.append(RawSenseInfo.from_dict(sense))

        return cls(
            word=word,
            word_unit=str(info.get("word_unit") or ""),
            word_type=str(info.get("word_type") or ""),
            senses=tuple(senses),
        )


@dataclass(frozen=True)
class QuizEntry:
    word: str
    question: tuple[str, ...]
    hint: str = NO_DEFINITION
    added_at: str = ""

    @property
    def chosung_key(self) -> str:
        return chosung_key(self.question)

    def with_timestamp(self, added_at: str) -> QuizEntry:
        return QuizEntry(word=self.word, question=self.question, hint=self.hint, added_at=added_at)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "word": self.word,
            "question": list(self.question),
            "hint": self.hint,
        }
        if self.added_at:
            out["addedAt"] = self.added_at
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> QuizEntry:
        question = raw.get("question") or []
        if isinstance(question, str):
            question = list(question)
        return cls(
            word=str(raw.get("word", "")),
            question=tuple(str(q) for q in question),
            hint=str(raw.get("hint") or NO_DEFINITION),
            added_at=str(raw.get("addedAt", "") or ""),
        )


@dataclass
class OperationResult:
    """Caller-facing outcome of a mutating pool operation.

    `kind` is empty on success, otherwise one of
    "validation", "duplicate" or "store".
    """

    success: bool
    message: str
    kind: str = ""
    key: str = ""
    total: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.key:
            out["key"] = self.key
        if self.total is not None:
            out["total"] = self.total
        return out
