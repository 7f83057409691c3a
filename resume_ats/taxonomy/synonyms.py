from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from resume_ats.features.keywords import keyword_terms
from resume_ats.normalize.utils import contains_phrase, normalize_text
from resume_ats.schemas.scoring import SkillCluster

from .local_taxonomy import get_default_taxonomy_provider

SynonymMap = Mapping[str, Sequence[str]]


def _normalized_synonyms(values: Iterable[str]) -> list[str]:
    output: list[str] = []
    for value in values:
        normalized = normalize_text(value)
        if normalized and normalized not in output:
            output.append(normalized)
    return output


def merge_synonyms(*layers: SynonymMap | None) -> dict[str, list[str]]:
    """Build a fresh map: built-in defaults, then each layer in order.

    A layer replaces the synonym list of any canonical key it redefines and
    leaves other keys untouched. Keys and synonyms are normalized so they
    compare against normalized resume text.
    """
    merged: dict[str, list[str]] = {}
    for layer in (get_default_taxonomy_provider().synonyms(), *layers):
        for key, values in (layer or {}).items():
            canonical = normalize_text(key)
            if not canonical:
                continue
            merged[canonical] = _normalized_synonyms(values or [])
    return merged


def expand_keywords(keywords: Iterable[str], synonyms: SynonymMap) -> set[str]:
    """Add the synonyms of every canonical term already present.

    Expansion runs canonical -> synonyms only; a synonym on its own never
    brings in its canonical term.
    """
    expanded = set(keywords)
    for keyword in list(expanded):
        expanded.update(synonyms.get(keyword) or ())
    return expanded


def expand_with_synonyms(text: str | None, overrides: SynonymMap | None = None) -> set[str]:
    return expand_keywords(keyword_terms(text), merge_synonyms(overrides))


def _term_present(term: str, keyword_set: set[str], normalized_text: str) -> bool:
    return term in keyword_set or contains_phrase(normalized_text, term)


def build_skill_clusters(
    job_terms: Iterable[str],
    resume_keywords: set[str],
    resume_normalized: str,
    synonyms: SynonymMap,
) -> list[SkillCluster]:
    targets = set(job_terms)
    clusters: list[SkillCluster] = []
    for canonical, values in synonyms.items():
        if canonical not in targets:
            continue
        matched = [value for value in values if _term_present(value, resume_keywords, resume_normalized)]
        has_canonical = _term_present(canonical, resume_keywords, resume_normalized)
        if not matched and not has_canonical:
            continue
        clusters.append(
            SkillCluster(
                canonical=canonical,
                synonyms=list(values),
                matched_synonyms=matched,
                has_canonical=has_canonical,
                should_suggest_canonical=not has_canonical and bool(matched),
            )
        )
    return clusters


def get_skill_clusters(
    job_keywords: Iterable[str],
    resume_text: str | None,
    overrides: SynonymMap | None = None,
) -> list[SkillCluster]:
    synonyms = merge_synonyms(overrides)
    resume_keywords = expand_keywords(keyword_terms(resume_text), synonyms)
    return build_skill_clusters(
        (normalize_text(term) for term in job_keywords),
        resume_keywords,
        normalize_text(resume_text),
        synonyms,
    )
