from __future__ import annotations

import argparse
from datetime import datetime
import json
import logging
from pathlib import Path
import sys
from typing import Any

from chosung_quiz.api import create_app
from chosung_quiz.config import cfg_get, load_config
from chosung_quiz.curation import BATCH_SIZE, DEFAULT_TIMEZONE, add_word, clear_pool, draw_batch, seed_pool
from chosung_quiz.sampler import DEFAULT_SEED_LIMIT
from chosung_quiz.search import search_archive
from chosung_quiz.store import PoolStore, build_store


LOGGER = logging.getLogger("chosung_quiz")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _archive_path(cfg: dict[str, Any]) -> Path:
    return Path(cfg_get(cfg, "archive.path", "dict.zip"))


def _timezone(cfg: dict[str, Any]) -> str:
    return str(cfg_get(cfg, "pool.timezone", DEFAULT_TIMEZONE))


def step_seed(cfg: dict[str, Any], store: PoolStore, limit: int | None = None) -> None:
    """Seed the pool from the dictionary archive."""

    seed_limit = limit if limit is not None else int(cfg_get(cfg, "pool.seed_limit", DEFAULT_SEED_LIMIT))
    LOGGER.info("[STEP] seed start limit=%d archive=%s", seed_limit, _archive_path(cfg))
    report = seed_pool(store, _archive_path(cfg), limit=seed_limit, tz_name=_timezone(cfg))
    LOGGER.info(
        "[STEP] seed success existing=%d sampled=%d saved=%d final=%d",
        report.existing,
        report.sampled,
        report.saved,
        report.final,
    )


def run_serve(cfg: dict[str, Any], store: PoolStore) -> None:
    """Optionally seed the pool, then serve the HTTP API."""

    if cfg_get(cfg, "server.seed_on_start", True):
        step_seed(cfg, store)

    app = create_app(cfg, store=store)
    host = str(cfg_get(cfg, "server.host", "0.0.0.0"))
    port = int(cfg_get(cfg, "server.port", 8080))
    LOGGER.info("Server start: http://%s:%d", host, port)
    app.run(host=host, port=port)


def run_command(args: argparse.Namespace, cfg: dict[str, Any]) -> int:
    """Run one CLI command and return the process exit status."""

    store = build_store(cfg, backend=args.store)

    if args.command == "serve":
        run_serve(cfg, store)
        return 0

    if args.command == "seed":
        step_seed(cfg, store, limit=args.limit)
        return 0

    if args.command == "search":
        results = search_archive(args.query, _archive_path(cfg))
        _print_json([r.to_dict() for r in results])
        return 0

    if args.command == "batch":
        size = args.size if args.size is not None else int(cfg_get(cfg, "pool.batch_size", BATCH_SIZE))
        _print_json([e.to_dict() for e in draw_batch(store, size=size)])
        return 0

    if args.command == "clear":
        result = clear_pool(store)
    else:
        result = add_word(store, args.word, args.hint, tz_name=_timezone(cfg))
    _print_json(result.to_dict())
    return 0 if result.success else 1


def _setup_logging(cfg: dict[str, Any]) -> None:
    logs_dir = Path(cfg_get(cfg, "paths.logs_dir", "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"chosung_quiz_{datetime.now().strftime('%Y%m%d')}.log"

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
        force=True,
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Chosung quiz pool builder and server")
    p.add_argument("--config", default="config.yaml", help="Config file path")
    p.add_argument("--store", choices=["memory", "json", "firebase"], default=None, help="Override store backend")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Seed the pool (optional) and serve the HTTP API")

    seed = sub.add_parser("seed", help="Seed the pool from the dictionary archive")
    seed.add_argument("--limit", type=int, default=None)

    search = sub.add_parser("search", help="Search the archive by headword substring")
    search.add_argument("query")

    batch = sub.add_parser("batch", help="Draw a random quiz batch from the pool")
    batch.add_argument("--size", type=int, default=None)

    sub.add_parser("clear", help="Remove every entry from the pool")

    add = sub.add_parser("add-word", help="Add a word with a hint to the pool")
    add.add_argument("word")
    add.add_argument("hint")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    # Load config first with lightweight fallback logging.
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    cfg = load_config(args.config)
    _setup_logging(cfg)

    LOGGER.info("Start command=%s store=%s", args.command, args.store or cfg_get(cfg, "store.backend", "json"))
    try:
        return run_command(args, cfg)
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Command failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
