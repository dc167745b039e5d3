"""Cleaning rules for raw dictionary words and definition text."""

from __future__ import annotations

import re

# Particles that survive inside parentheses, e.g. "먹(을)" -> "먹을".
PARTICLES = frozenset({"을", "를", "이", "가", "와", "과", "은", "는", "도", "만"})

PAREN_RE = re.compile(r"\(([^)]*)\)")
TAG_RE = re.compile(r"<[^>]*>")
LONG_NUMBER_RE = re.compile(r"[0-9]{5,}")
QUOTED_RE = re.compile(r"'[^']*'")
BRACKET_RE = re.compile(r"[_\[\]「」『』()]")
SPACE_RE = re.compile(r"\s+")


def _keep_particle(match: re.Match[str]) -> str:
    content = match.group(1)
    if len(content) <= 2 and content in PARTICLES:
        return content
    return ""


def clean_word(raw: str) -> str:
    """Drop parenthetical groups from a headword, keeping bare particles."""
    return PAREN_RE.sub(_keep_particle, raw or "").strip()


def clean_hint_text(raw: str) -> str:
    """Strip markup, internal ids, quoted spans and bracket glyphs from a definition."""
    text = TAG_RE.sub("", raw or "")
    text = LONG_NUMBER_RE.sub("", text)
    text = QUOTED_RE.sub("", text)
    text = BRACKET_RE.sub(" ", text)
    text = SPACE_RE.sub(" ", text)
    return text.strip()
