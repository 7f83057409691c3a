from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_ats.core.config import settings

from .resume import ResumeRecord

SynonymOverrides = dict[str, list[str]]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillCluster(ApiModel):
    canonical: str
    synonyms: list[str] = Field(default_factory=list)
    matched_synonyms: list[str] = Field(default_factory=list)
    has_canonical: bool = False
    should_suggest_canonical: bool = False


class ChecklistItem(ApiModel):
    label: str
    passed: bool


class ScoreReport(ApiModel):
    overall_score: int = Field(default=0, ge=0, le=100)
    keyword_score: int = Field(default=0, ge=0, le=60)
    completeness_score: int = Field(default=0, ge=0)
    formatting_score: int = Field(default=0, ge=0, le=15)
    match_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    word_count: int = Field(default=0, ge=0)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    matched_phrases: list[str] = Field(default_factory=list)
    missing_phrases: list[str] = Field(default_factory=list)
    skill_clusters: list[SkillCluster] = Field(default_factory=list)
    checklist: list[ChecklistItem] = Field(default_factory=list)
    length_warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    ats_tips: list[str] = Field(default_factory=list)


class MissingTerms(ApiModel):
    missing_keywords: list[str] = Field(default_factory=list)
    missing_phrases: list[str] = Field(default_factory=list)


class ScoreRequest(ApiModel):
    resume_data: ResumeRecord = Field(default_factory=ResumeRecord)
    job_description: str | None = Field(default="", max_length=settings.ats_max_job_description_chars)
    synonym_overrides: SynonymOverrides | None = None
    role_preset: str | None = Field(default=None, max_length=120)
    job_keywords: list[str] | None = Field(default=None, max_length=500)
    job_phrases: list[str] | None = Field(default=None, max_length=500)


class ScoreResponse(ApiModel):
    score: ScoreReport


class RolePreset(ApiModel):
    label: str
    description: str = ""
    synonyms: SynonymOverrides = Field(default_factory=dict)


class RolePresetsResponse(ApiModel):
    presets: list[RolePreset] = Field(default_factory=list)


class HighlightSegment(ApiModel):
    value: str
    highlight: bool


class HighlightRequest(ApiModel):
    text: str = Field(default="", max_length=settings.ats_max_highlight_chars)
    terms: list[str] = Field(default_factory=list, max_length=1000)


class HighlightResponse(ApiModel):
    segments: list[HighlightSegment] = Field(default_factory=list)
