"""Thin Flask layer exposing search, batch draw, clear and add-word."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from .config import cfg_get
from .curation import BATCH_SIZE, DEFAULT_TIMEZONE, add_word, clear_pool, draw_batch
from .search import search_archive
from .store import PoolStore, StoreError, build_store

LOGGER = logging.getLogger(__name__)


def create_app(cfg: dict[str, Any], store: PoolStore | None = None) -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.config["cfg"] = cfg
    app.config["store"] = store if store is not None else build_store(cfg)
    register_routes(app)
    return app


def register_routes(app: Flask) -> None:
    def get_store() -> PoolStore:
        return app.config["store"]

    def setting(path: str, default: Any) -> Any:
        return cfg_get(app.config["cfg"], path, default)

    @app.get("/api/search")
    def api_search():
        query = (request.args.get("word") or "").strip()
        results = search_archive(query, setting("archive.path", "dict.zip"))
        return jsonify([r.to_dict() for r in results])

    @app.get("/api/newbatch")
    def api_newbatch():
        size = int(setting("pool.batch_size", BATCH_SIZE))
        try:
            batch = draw_batch(get_store(), size=size)
        except StoreError as exc:
            LOGGER.error("Batch failed: %s", exc)
            return jsonify([])
        return jsonify([e.to_dict() for e in batch])

    @app.get("/api/clear-pool")
    def api_clear_pool():
        return jsonify(clear_pool(get_store()).to_dict())

    @app.get("/api/add-word")
    def api_add_word():
        result = add_word(
            get_store(),
            request.args.get("word"),
            request.args.get("hint"),
            tz_name=str(setting("pool.timezone", DEFAULT_TIMEZONE)),
        )
        return jsonify(result.to_dict())
