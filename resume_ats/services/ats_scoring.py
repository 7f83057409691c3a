from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.features.keywords import DEFAULT_PHRASE_SIZES, keyword_terms, phrase_terms
from resume_ats.features.resume_text import coerce_resume, project_resume_text
from resume_ats.normalize.utils import (
    contains_phrase,
    has_text,
    has_valid_date,
    normalize_text,
    word_count,
)
from resume_ats.schemas.resume import ResumeRecord
from resume_ats.schemas.scoring import ChecklistItem, MissingTerms, ScoreReport
from resume_ats.taxonomy import (
    SynonymMap,
    build_skill_clusters,
    expand_keywords,
    get_default_taxonomy_provider,
    merge_synonyms,
)

logger = logging.getLogger(__name__)

EMPTY_JOB_DESCRIPTION_MESSAGE = "Paste a job description to get an ATS score."
ALIGNED_MESSAGE = "Your resume looks well aligned. Keep refining keywords."

ATS_TIPS = (
    "Use standard section headings like Experience, Education, Skills.",
    "Avoid tables or columns; keep a simple layout.",
    "Use consistent date formats (e.g., 2021-2023).",
    "Use bullet points for achievements and impact.",
    "Avoid icons or graphics in the content.",
)

_COMPLETENESS_DEFAULTS = {
    "full_name": 3,
    "email": 3,
    "phone": 3,
    "location": 2,
    "summary": 4,
    "experience": 5,
    "education": 3,
    "skills": 5,
    "projects": 2,
}
_FORMATTING_DEFAULTS = {
    "experience_dates": 5,
    "education_dates": 5,
    "experience_bullets": 5,
}


@dataclass(frozen=True, slots=True)
class ResumeSignals:
    """Presence predicates shared by completeness, formatting, checklist and suggestions."""

    has_full_name: bool
    has_email: bool
    has_phone: bool
    has_location: bool
    summary_chars: int
    has_experience: bool
    has_education: bool
    has_skills: bool
    has_projects: bool
    experience_dates_ok: bool
    education_dates_ok: bool
    experience_bullets_ok: bool


def _config_int(path: str, default: int) -> int:
    value = get_scoring_value(path, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _config_float(path: str, default: float) -> float:
    value = get_scoring_value(path, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _phrase_sizes() -> tuple[int, ...]:
    raw = get_scoring_value("ats.phrase_sizes", list(DEFAULT_PHRASE_SIZES))
    if not isinstance(raw, list):
        return DEFAULT_PHRASE_SIZES
    sizes = tuple(int(size) for size in raw if isinstance(size, int) and size > 0)
    return sizes or DEFAULT_PHRASE_SIZES


def collect_signals(resume: ResumeRecord) -> ResumeSignals:
    personal = resume.personal_info
    # Empty lists pass these vacuously; the checklist adds the non-empty requirement.
    experience_dates_ok = all(
        has_valid_date(exp.start_date) and has_valid_date(exp.end_date) for exp in resume.experience
    )
    education_dates_ok = all(
        has_valid_date(edu.start_year) and has_valid_date(edu.end_year) for edu in resume.education
    )
    experience_bullets_ok = all(
        any(has_text(achievement) for achievement in exp.achievements) for exp in resume.experience
    )
    return ResumeSignals(
        has_full_name=has_text(personal.full_name),
        has_email=has_text(personal.email),
        has_phone=has_text(personal.phone),
        has_location=has_text(personal.location),
        summary_chars=len((personal.summary or "").strip()),
        has_experience=bool(resume.experience),
        has_education=bool(resume.education),
        has_skills=bool(resume.skills.technical or resume.skills.soft),
        has_projects=bool(resume.projects),
        experience_dates_ok=experience_dates_ok,
        education_dates_ok=education_dates_ok,
        experience_bullets_ok=experience_bullets_ok,
    )


def completeness_score(signals: ResumeSignals) -> int:
    summary_min = _config_int("ats.summary.min_chars", 50)
    awarded = {
        "full_name": signals.has_full_name,
        "email": signals.has_email,
        "phone": signals.has_phone,
        "location": signals.has_location,
        "summary": signals.summary_chars > summary_min,
        "experience": signals.has_experience,
        "education": signals.has_education,
        "skills": signals.has_skills,
        "projects": signals.has_projects,
    }
    return sum(
        _config_int(f"ats.completeness.{field}", points)
        for field, points in _COMPLETENESS_DEFAULTS.items()
        if awarded[field]
    )


def formatting_score(signals: ResumeSignals) -> int:
    awarded = {
        "experience_dates": signals.experience_dates_ok,
        "education_dates": signals.education_dates_ok,
        "experience_bullets": signals.experience_bullets_ok,
    }
    return sum(
        _config_int(f"ats.formatting.{check}", points)
        for check, points in _FORMATTING_DEFAULTS.items()
        if awarded[check]
    )


def build_checklist(signals: ResumeSignals) -> list[ChecklistItem]:
    summary_min = _config_int("ats.summary.min_chars", 50)
    items = [
        ("Full name included", signals.has_full_name),
        ("Email included", signals.has_email),
        ("Phone number included", signals.has_phone),
        (f"Summary length is {summary_min}+ characters", signals.summary_chars >= summary_min),
        ("At least one experience entry", signals.has_experience),
        ("Experience entries have dates", signals.experience_dates_ok and signals.has_experience),
        ("At least one education entry", signals.has_education),
        ("Education entries have dates", signals.education_dates_ok and signals.has_education),
        ("Skills section filled", signals.has_skills),
        ("Experience has bullet points", signals.experience_bullets_ok and signals.has_experience),
    ]
    return [ChecklistItem(label=label, passed=passed) for label, passed in items]


def build_suggestions(signals: ResumeSignals, match_rate: float, missing_phrases: Sequence[str]) -> list[str]:
    suggestions: list[str] = []
    if match_rate < _config_float("ats.match.target_rate", 0.6):
        suggestions.append("Add more keywords from the job description.")
    if missing_phrases:
        suggestions.append("Try to include key phrases from the job description.")
    if not signals.has_experience:
        suggestions.append("Add at least one experience entry.")
    if not signals.has_education:
        suggestions.append("Add at least one education entry.")
    if not signals.has_skills:
        suggestions.append("Add skills that match the job description.")
    if signals.summary_chars < _config_int("ats.summary.min_chars", 50):
        suggestions.append("Expand your summary with 2-3 strong sentences.")
    if not signals.experience_dates_ok:
        suggestions.append("Add consistent start/end dates for experience.")
    if not signals.education_dates_ok:
        suggestions.append("Add consistent start/end dates for education.")
    if not signals.experience_bullets_ok:
        suggestions.append("Add impact-focused bullet points in experience.")
    if not suggestions:
        suggestions.append(ALIGNED_MESSAGE)
    return suggestions


def build_length_warnings(words: int) -> list[str]:
    min_words = _config_int("ats.length.min_words", 150)
    max_words = _config_int("ats.length.max_words", 850)
    warnings: list[str] = []
    if words < min_words:
        warnings.append(f"Resume looks too short (under {min_words} words).")
    if words > max_words:
        warnings.append(f"Resume looks too long (over {max_words} words).")
    return warnings


def _normalized_targets(values: Iterable[str]) -> list[str]:
    output: list[str] = []
    for value in values:
        normalized = normalize_text(value)
        if normalized and normalized not in output:
            output.append(normalized)
    return output


def _resolve_synonyms(overrides: SynonymMap | None, role_preset: str | None) -> dict[str, list[str]]:
    preset_map = None
    if role_preset and role_preset.strip():
        preset_map = get_default_taxonomy_provider().preset_synonyms(role_preset)
    return merge_synonyms(preset_map, overrides)


def list_role_presets() -> list[dict[str, Any]]:
    return [
        {
            "label": preset["label"],
            "description": preset["description"],
            "synonyms": {key: list(values) for key, values in preset["synonyms"].items()},
        }
        for preset in get_default_taxonomy_provider().role_presets()
    ]


def get_missing_keywords(
    text: str | None,
    job_keywords: Sequence[str],
    job_phrases: Sequence[str],
    overrides: SynonymMap | None = None,
) -> MissingTerms:
    if not job_keywords and not job_phrases:
        return MissingTerms()
    normalized = normalize_text(text)
    keyword_set = expand_keywords(keyword_terms(text), merge_synonyms(overrides))
    return MissingTerms(
        missing_keywords=[word for word in job_keywords if word not in keyword_set],
        missing_phrases=[phrase for phrase in job_phrases if not contains_phrase(normalized, phrase)],
    )


def score_resume(
    resume: ResumeRecord | Mapping[str, Any] | None,
    job_description_text: str | None,
    overrides: SynonymMap | None = None,
    *,
    job_keywords: Sequence[str] | None = None,
    job_phrases: Sequence[str] | None = None,
    role_preset: str | None = None,
) -> ScoreReport:
    """Score a resume against a job description.

    Pre-extracted ``job_keywords``/``job_phrases`` replace the terms that would
    otherwise be pulled from ``job_description_text``. Raises
    ``UnknownRolePresetError`` for an unknown ``role_preset``; content problems
    never raise and count as "not present" instead.
    """
    has_targets = bool(job_keywords) or bool(job_phrases)
    if not has_text(job_description_text) and not has_targets:
        return ScoreReport(suggestions=[EMPTY_JOB_DESCRIPTION_MESSAGE])

    record = coerce_resume(resume)
    synonyms = _resolve_synonyms(overrides, role_preset)

    if has_targets:
        target_keywords = _normalized_targets(job_keywords or [])
        target_phrases = _normalized_targets(job_phrases or [])
    else:
        target_keywords = keyword_terms(job_description_text)
        target_phrases = phrase_terms(job_description_text, _phrase_sizes())

    resume_text = project_resume_text(record)
    resume_normalized = normalize_text(resume_text)
    words = word_count(resume_normalized)
    resume_keywords = expand_keywords(keyword_terms(resume_text), synonyms)

    matched_keywords = [word for word in target_keywords if word in resume_keywords]
    missing_keywords = [word for word in target_keywords if word not in resume_keywords]
    matched_phrases = [phrase for phrase in target_phrases if contains_phrase(resume_normalized, phrase)]
    missing_phrases = [phrase for phrase in target_phrases if not contains_phrase(resume_normalized, phrase)]

    keyword_weight = _config_int("ats.match.keyword_weight", 1)
    phrase_weight = _config_int("ats.match.phrase_weight", 2)
    total_weight = len(target_keywords) * keyword_weight + len(target_phrases) * phrase_weight
    matched_weight = len(matched_keywords) * keyword_weight + len(matched_phrases) * phrase_weight
    match_rate = matched_weight / total_weight if total_weight else 0.0
    # Half-up rounding.
    keyword_score = math.floor(match_rate * _config_int("ats.match.max_points", 60) + 0.5)

    signals = collect_signals(record)
    completeness = completeness_score(signals)
    formatting = formatting_score(signals)
    overall = min(_config_int("ats.overall_max", 100), keyword_score + completeness + formatting)

    report = ScoreReport(
        overall_score=overall,
        keyword_score=keyword_score,
        completeness_score=completeness,
        formatting_score=formatting,
        match_rate=match_rate,
        word_count=words,
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
        matched_phrases=matched_phrases,
        missing_phrases=missing_phrases,
        skill_clusters=build_skill_clusters(
            [*target_keywords, *target_phrases], resume_keywords, resume_normalized, synonyms
        ),
        checklist=build_checklist(signals),
        length_warnings=build_length_warnings(words),
        suggestions=build_suggestions(signals, match_rate, missing_phrases),
        ats_tips=list(ATS_TIPS),
    )
    logger.debug(
        "ats_score_breakdown keyword=%s completeness=%s formatting=%s keywords=%s phrases=%s",
        keyword_score,
        completeness,
        formatting,
        len(target_keywords),
        len(target_phrases),
    )
    return report


def add_skill_keywords(
    resume: ResumeRecord | Mapping[str, Any] | None,
    keywords: Iterable[str],
) -> ResumeRecord:
    """Return a copy of the resume with new keywords appended to technical skills."""
    record = coerce_resume(resume)
    existing = {skill.strip().lower() for skill in [*record.skills.technical, *record.skills.soft]}
    technical = list(record.skills.technical)
    for keyword in keywords:
        cleaned = (keyword or "").strip()
        if not cleaned or cleaned.lower() in existing:
            continue
        existing.add(cleaned.lower())
        technical.append(cleaned)
    skills = record.skills.model_copy(update={"technical": technical}, deep=True)
    return record.model_copy(update={"skills": skills}, deep=True)
