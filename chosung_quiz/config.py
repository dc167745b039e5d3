"""Configuration: hardcoded defaults merged with an optional YAML file."""

from __future__ import annotations

from copy import deepcopy
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "archive": {
        "path": "dict.zip",
    },
    "pool": {
        "seed_limit": 7,
        "batch_size": 19,
        "timezone": "Asia/Seoul",
    },
    "store": {
        "backend": "json",
        "json_path": "data/quiz_pool.json",
        "firebase_url": "",
        "firebase_auth": "",
        "firebase_path": "quiz_pool",
        "timeout_sec": 10,
    },
    "server": {
        "host": "0.0.0.0",
        "port": 8080,
        "seed_on_start": True,
    },
    "paths": {
        "logs_dir": "logs",
    },
}


def deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = deepcopy(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def cfg_get(cfg: dict[str, Any], path: str, default: Any) -> Any:
    cur: Any = cfg
    for key in path.split("."):
        if not isinstance(cur, dict) or key not in cur:
            return default
        cur = cur[key]
    return cur


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    if not isinstance(cfg.get(name), dict):
        cfg[name] = {}
    return cfg[name]


def apply_env_overrides(cfg: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    out = deepcopy(cfg)
    if env.get("FIREBASE_DATABASE_URL"):
        _section(out, "store")["firebase_url"] = env["FIREBASE_DATABASE_URL"]
        _section(out, "store")["backend"] = "firebase"
    if env.get("FIREBASE_AUTH_TOKEN"):
        _section(out, "store")["firebase_auth"] = env["FIREBASE_AUTH_TOKEN"]
    if env.get("DICT_ZIP_PATH"):
        _section(out, "archive")["path"] = env["DICT_ZIP_PATH"]
    if env.get("PORT"):
        try:
            _section(out, "server")["port"] = int(env["PORT"])
        except ValueError:
            LOGGER.warning("Ignoring non-numeric PORT=%s", env["PORT"])
    return out


def load_config(config_path: str | Path, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Load YAML config, merge it over the defaults, then apply env overrides.

    A missing or unreadable file falls back to the defaults.
    """

    cfg_path = Path(config_path)
    merged = deepcopy(DEFAULT_CONFIG)
    if not cfg_path.exists():
        LOGGER.warning("Config not found: %s. Using defaults.", cfg_path)
    else:
        try:
            loaded = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
            if isinstance(loaded, dict):
                merged = deep_update(DEFAULT_CONFIG, loaded)
            else:
                LOGGER.warning("Config format invalid. Using defaults.")
        except (OSError, yaml.YAMLError) as exc:
            LOGGER.warning("Failed to parse config (%s). Using defaults.", exc)
    return apply_env_overrides(merged, environ)
