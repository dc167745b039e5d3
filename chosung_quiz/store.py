"""Pool store backends for accepted quiz entries.

Every backend offers the same four calls: exact-word lookup, keyed put,
full read and full clear. Failures surface as StoreError carrying the
underlying message; nothing is retried here.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import re
import tempfile
import threading
import time
from typing import Any, Protocol

import requests

from .config import cfg_get
from .models import QuizEntry

LOGGER = logging.getLogger(__name__)

# Characters Firebase rejects in keys.
KEY_UNSAFE_RE = re.compile(r"[.$#\[\]/]")


class StoreError(RuntimeError):
    """A pool store call failed."""


class PoolStore(Protocol):
    def find_by_word(self, word: str) -> bool: ...

    def put(self, key: str, entry: QuizEntry) -> None: ...

    def read_all(self) -> list[QuizEntry]: ...

    def remove_all(self) -> None: ...


def make_store_key(word: str, now_ms: int | None = None) -> str:
    stamp = int(time.time() * 1000) if now_ms is None else now_ms
    return f"{KEY_UNSAFE_RE.sub('_', word)}_{stamp}"


class MemoryPoolStore:
    def __init__(self) -> None:
        self.entries: dict[str, QuizEntry] = {}

    def find_by_word(self, word: str) -> bool:
        return any(e.word == word for e in self.entries.values())

    def put(self, key: str, entry: QuizEntry) -> None:
        self.entries[key] = entry

    def read_all(self) -> list[QuizEntry]:
        return list(self.entries.values())

    def remove_all(self) -> None:
        self.entries.clear()


class JsonFilePoolStore:
    """Whole pool kept in one JSON object file `{key: entry}`.

    Calls on one instance are serialized, and every write replaces the file
    atomically so readers never see a partial document.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            raise StoreError(f"Failed to read pool file {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"Pool file {self.path} is not a JSON object")
        return payload

    def _write(self, payload: dict[str, Any]) -> None:
        tmp_name = ""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StoreError(f"Failed to write pool file {self.path}: {exc}") from exc

    def find_by_word(self, word: str) -> bool:
        with self._lock:
            payload = self._load()
        return any(isinstance(v, dict) and v.get("word") == word for v in payload.values())

    def put(self, key: str, entry: QuizEntry) -> None:
        with self._lock:
            payload = self._load()
            payload[key] = entry.to_dict()
            self._write(payload)

    def read_all(self) -> list[QuizEntry]:
        with self._lock:
            payload = self._load()
        return [QuizEntry.from_dict(v) for v in payload.values() if isinstance(v, dict)]

    def remove_all(self) -> None:
        with self._lock:
            if self.path.exists():
                self._write({})


class FirebasePoolStore:
    """Firebase Realtime Database over its REST API.

    Exact-word lookup relies on an `".indexOn": "word"` rule for the pool path.
    """

    def __init__(
        self,
        database_url: str,
        path: str = "quiz_pool",
        auth: str = "",
        timeout_sec: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        if not database_url:
            raise ValueError("database_url is required for FirebasePoolStore")
        self.base_url = f"{database_url.rstrip('/')}/{path.strip('/')}"
        self.auth = auth
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    def _url(self, key: str = "") -> str:
        return f"{self.base_url}/{key}.json" if key else f"{self.base_url}.json"

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        params = dict(kwargs.pop("params", {}))
        if self.auth:
            params["auth"] = self.auth
        try:
            resp = self.session.request(method=method, url=url, params=params, timeout=self.timeout_sec, **kwargs)
            resp.raise_for_status()
            return resp.json() if resp.content else None
        except (requests.RequestException, ValueError) as exc:
            raise StoreError(f"Firebase {method} failed: {exc}") from exc

    def find_by_word(self, word: str) -> bool:
        params = {
            "orderBy": json.dumps("word"),
            "equalTo": json.dumps(word, ensure_ascii=False),
        }
        return bool(self._request("GET", self._url(), params=params))

    def put(self, key: str, entry: QuizEntry) -> None:
        self._request("PUT", self._url(key), json=entry.to_dict())

    def read_all(self) -> list[QuizEntry]:
        data = self._request("GET", self._url())
        if not isinstance(data, dict):
            return []
        return [QuizEntry.from_dict(v) for v in data.values() if isinstance(v, dict)]

    def remove_all(self) -> None:
        self._request("DELETE", self._url())


def build_store(cfg: dict[str, Any], backend: str | None = None) -> PoolStore:
    kind = backend or str(cfg_get(cfg, "store.backend", "json"))
    if kind == "memory":
        return MemoryPoolStore()
    if kind == "json":
        return JsonFilePoolStore(cfg_get(cfg, "store.json_path", "data/quiz_pool.json"))
    if kind == "firebase":
        return FirebasePoolStore(
            database_url=str(cfg_get(cfg, "store.firebase_url", "")),
            path=str(cfg_get(cfg, "store.firebase_path", "quiz_pool")),
            auth=str(cfg_get(cfg, "store.firebase_auth", "")),
            timeout_sec=float(cfg_get(cfg, "store.timeout_sec", 10)),
        )
    raise ValueError(f"Unknown store backend: {kind}")
