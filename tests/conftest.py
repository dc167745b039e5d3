from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Any, Callable
import zipfile

import pytest

# Make package importable when running tests from the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chosung_quiz.store import MemoryPoolStore  # noqa: E402


def make_item(
    word: str,
    definitions: list[str] | None = None,
    word_unit: str = "단어",
    word_type: str = "고유어",
    proverb_definitions: list[str] | None = None,
) -> dict[str, Any]:
    """Build one `channel.item[]` element in the dictionary export layout."""
    senses: list[dict[str, Any]] = [{"definition_original": d} for d in definitions or []]
    senses += [{"definition": d} for d in proverb_definitions or []]
    return {
        "word_info": {
            "word": word,
            "word_unit": word_unit,
            "word_type": word_type,
            "pos_info": [{"comm_pattern_info": [{"sense_info": senses}]}],
        }
    }


def channel(*items: dict[str, Any]) -> dict[str, Any]:
    return {"channel": {"item": list(items)}}


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Write a zip whose members are given as name -> JSON payload or raw bytes."""

    def _make(members: dict[str, Any], name: str = "dict.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for member, payload in members.items():
                if isinstance(payload, bytes):
                    zf.writestr(member, payload)
                else:
                    zf.writestr(member, json.dumps(payload, ensure_ascii=False).encode("utf-8"))
        return path

    return _make


@pytest.fixture
def store() -> MemoryPoolStore:
    return MemoryPoolStore()
