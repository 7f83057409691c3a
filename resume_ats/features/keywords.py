from __future__ import annotations

from collections.abc import Iterable

from resume_ats.normalize.utils import normalized_words

STOP_WORDS = frozenset({
    "the", "and", "for", "with", "that", "this", "from", "your", "you", "are",
    "but", "not", "was", "were", "has", "have", "had", "will", "would", "can",
    "could", "should", "may", "might", "into", "onto", "over", "under", "a",
    "an", "of", "to", "in", "on", "at", "by", "as", "or", "is", "be", "we",
    "our", "their", "they", "it", "its", "if", "than", "then", "so", "such",
})

DEFAULT_PHRASE_SIZES: tuple[int, ...] = (2, 3)
MIN_KEYWORD_LENGTH = 3


def is_keyword_candidate(word: str) -> bool:
    return len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS


def _unique(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output


def keyword_terms(text: str | None) -> list[str]:
    """Distinct keyword candidates in first-seen order."""
    return _unique(word for word in normalized_words(text) if is_keyword_candidate(word))


def phrase_terms(text: str | None, sizes: Iterable[int] = DEFAULT_PHRASE_SIZES) -> list[str]:
    """Distinct n-grams whose every word is a keyword candidate.

    Windows slide over the full word list, so a stop word inside a window
    disqualifies it instead of being skipped over.
    """
    words = normalized_words(text)
    qualifies = [is_keyword_candidate(word) for word in words]
    phrases: list[str] = []
    for size in sizes:
        if size < 1:
            continue
        for start in range(len(words) - size + 1):
            if all(qualifies[start:start + size]):
                phrases.append(" ".join(words[start:start + size]))
    return _unique(phrases)


def extract_keywords(text: str | None) -> set[str]:
    return set(keyword_terms(text))


def extract_phrases(text: str | None, sizes: Iterable[int] = DEFAULT_PHRASE_SIZES) -> set[str]:
    return set(phrase_terms(text, sizes))
