from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from resume_ats.normalize.utils import has_text
from resume_ats.schemas.resume import ResumeRecord


def coerce_resume(resume: ResumeRecord | Mapping[str, Any] | None) -> ResumeRecord:
    if resume is None:
        return ResumeRecord()
    if isinstance(resume, ResumeRecord):
        return resume
    return ResumeRecord.model_validate(resume)


def _resume_fields(resume: ResumeRecord) -> Iterable[str | None]:
    personal = resume.personal_info
    yield from (
        personal.full_name,
        personal.email,
        personal.phone,
        personal.location,
        personal.linked_in,
        personal.portfolio,
        personal.summary,
    )
    for exp in resume.experience:
        yield from (exp.company, exp.position, exp.location, exp.start_date, exp.end_date)
        yield from exp.achievements
        yield from exp.keywords
    for edu in resume.education:
        yield from (edu.degree, edu.institution, edu.start_year, edu.end_year, edu.description)
    for proj in resume.projects:
        yield from (proj.project_name, proj.description, proj.technologies_used, proj.project_link)
    for cert in resume.certifications:
        yield from (cert.certificate_name, cert.issuer, cert.year, cert.credential_link)
    for ach in resume.achievements:
        yield from (ach.title, ach.description, ach.year)
    for lang in resume.languages:
        yield from (lang.language, lang.proficiency)
    yield from resume.skills.technical
    yield from resume.skills.soft


def project_resume_text(resume: ResumeRecord | Mapping[str, Any] | None) -> str:
    """Flatten every populated text field of a resume into one space-joined blob."""
    record = coerce_resume(resume)
    return " ".join(value.strip() for value in _resume_fields(record) if has_text(value))
