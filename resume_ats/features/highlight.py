from __future__ import annotations

import re
from collections.abc import Iterable

from resume_ats.schemas.scoring import HighlightSegment


def _term_pattern(term: str) -> str:
    return r"\s+".join(re.escape(part) for part in term.split())


def highlight_segments(text: str, terms: Iterable[str]) -> list[HighlightSegment]:
    """Split text into plain and highlighted runs for the given terms.

    Matching is case-insensitive on word boundaries; longer terms are tried
    first so "machine learning" wins over "machine".
    """
    unique_terms = sorted({term.strip() for term in terms if term and term.strip()}, key=len, reverse=True)
    if not text.strip() or not unique_terms:
        return [HighlightSegment(value=text, highlight=False)]

    regex = re.compile(r"\b(" + "|".join(_term_pattern(term) for term in unique_terms) + r")\b", re.IGNORECASE)
    segments: list[HighlightSegment] = []
    last_index = 0
    for match in regex.finditer(text):
        if match.start() > last_index:
            segments.append(HighlightSegment(value=text[last_index:match.start()], highlight=False))
        segments.append(HighlightSegment(value=match.group(0), highlight=True))
        last_index = match.end()

    if last_index < len(text):
        segments.append(HighlightSegment(value=text[last_index:], highlight=False))
    return segments or [HighlightSegment(value=text, highlight=False)]
