from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_YEAR_RE = re.compile(r"\d{4}")
_OPEN_ENDED_DATES = {"present", "current"}


def normalize_text(value: str | None) -> str:
    """Lowercase, replace anything outside [a-z0-9] with a space, collapse runs."""
    if not value:
        return ""
    return " ".join(_NON_ALNUM_RE.sub(" ", value.lower()).split())


def normalized_words(value: str | None) -> list[str]:
    normalized = normalize_text(value)
    return normalized.split(" ") if normalized else []


def word_count(value: str | None) -> int:
    return len(normalized_words(value))


def contains_phrase(normalized_text: str, phrase: str) -> bool:
    """Whole-word containment of an already normalized phrase."""
    if not phrase or not normalized_text:
        return False
    return f" {phrase} " in f" {normalized_text} "


def has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def has_valid_date(value: str | None) -> bool:
    if not value:
        return False
    lowered = value.strip().lower()
    if lowered in _OPEN_ENDED_DATES:
        return True
    return bool(_YEAR_RE.search(lowered))
