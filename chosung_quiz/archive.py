"""Streaming access to the zipped dictionary export.

Members are read one at a time so peak memory stays bounded by the largest
single JSON file, not the whole archive. Each pass opens its own handle.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import re
from typing import Any, Iterator
import zipfile
import zlib

LOGGER = logging.getLogger(__name__)

JSON_ENTRY_RE = re.compile(r"\.json$", re.IGNORECASE)


class ArchiveOpenError(RuntimeError):
    """The dictionary archive itself could not be opened."""


def iter_json_entries(zip_path: str | Path) -> Iterator[tuple[str, bytes]]:
    """Yield `(member name, raw bytes)` for every `.json` member.

    Raises ArchiveOpenError on first iteration when the container is missing
    or unreadable. Members that fail to read are logged and skipped.
    """

    path = Path(zip_path)
    try:
        zf = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveOpenError(f"Failed to open archive {path}: {exc}") from exc

    LOGGER.info("Archive opened: %s", path)
    count = 0
    with zf:
        for info in zf.infolist():
            if info.is_dir() or not JSON_ENTRY_RE.search(info.filename):
                continue
            try:
                data = zf.read(info)
            except (OSError, EOFError, RuntimeError, NotImplementedError, zipfile.BadZipFile, zlib.error) as exc:
                LOGGER.warning("Skip unreadable entry %s: %s", info.filename, exc)
                continue
            count += 1
            yield info.filename, data
    LOGGER.info("Archive closed: %s (json entries=%d)", path, count)


def decode_entry(name: str, data: bytes) -> list[Any]:
    """Return the `channel.item` list of one entry, or [] when unusable."""
    try:
        parsed = json.loads(data.decode("utf-8-sig"))
    except (UnicodeDecodeError, ValueError) as exc:
        LOGGER.warning("Skip entry %s: invalid JSON (%s)", name, exc)
        return []

    channel = parsed.get("channel") if isinstance(parsed, dict) else None
    items = channel.get("item") if isinstance(channel, dict) else None
    if not isinstance(items, list):
        LOGGER.debug("Skip entry %s: no channel.item list", name)
        return []
    return items


def iter_raw_items(zip_path: str | Path) -> Iterator[Any]:
    """Yield every raw `channel.item[]` element across the archive."""
    for name, data in iter_json_entries(zip_path):
        yield from decode_entry(name, data)
