from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base for resume sections: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PersonalInfo(ResumeModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linked_in: str | None = None
    portfolio: str | None = None
    summary: str | None = None


class ExperienceItem(ResumeModel):
    id: str | None = None
    company: str | None = None
    position: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    achievements: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)

    @field_validator("achievements", "keywords", mode="before")
    @classmethod
    def _drop_null_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


class EducationItem(ResumeModel):
    id: str | None = None
    degree: str | None = None
    institution: str | None = None
    start_year: str | None = None
    end_year: str | None = None
    description: str | None = None


class Skills(ResumeModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)

    @field_validator("technical", "soft", mode="before")
    @classmethod
    def _drop_null_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value


class Certification(ResumeModel):
    id: str | None = None
    certificate_name: str | None = None
    issuer: str | None = None
    year: str | None = None
    credential_link: str | None = None


class Project(ResumeModel):
    id: str | None = None
    project_name: str | None = None
    description: str | None = None
    technologies_used: str | None = None
    project_link: str | None = None


class Achievement(ResumeModel):
    id: str | None = None
    title: str | None = None
    description: str | None = None
    year: str | None = None


class Language(ResumeModel):
    id: str | None = None
    language: str | None = None
    proficiency: str | None = None


class CustomSection(ResumeModel):
    id: str | None = None
    title: str | None = None
    items: list[Any] = Field(default_factory=list)


class ResumeRecord(ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    certifications: list[Certification] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)

    @field_validator(
        "experience",
        "education",
        "certifications",
        "projects",
        "achievements",
        "languages",
        "custom_sections",
        mode="before",
    )
    @classmethod
    def _null_list_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("personal_info", "skills", mode="before")
    @classmethod
    def _null_section_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value
