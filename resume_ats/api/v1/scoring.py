import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from resume_ats.core.rate_limit import rate_limit
from resume_ats.features.highlight import highlight_segments
from resume_ats.schemas.scoring import (
    HighlightRequest,
    HighlightResponse,
    RolePresetsResponse,
    ScoreReport,
    ScoreRequest,
    ScoreResponse,
)
from resume_ats.services.ats_report import REPORT_FILENAME, build_report_text
from resume_ats.services.ats_scoring import list_role_presets, score_resume
from resume_ats.taxonomy import UnknownRolePresetError

logger = logging.getLogger(__name__)

router = APIRouter()


def _score(payload: ScoreRequest) -> ScoreReport:
    try:
        report = score_resume(
            payload.resume_data,
            payload.job_description,
            payload.synonym_overrides,
            job_keywords=payload.job_keywords,
            job_phrases=payload.job_phrases,
            role_preset=payload.role_preset,
        )
    except UnknownRolePresetError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    logger.info(
        "ats_score_computed overall=%s match_rate=%.2f words=%s preset=%s",
        report.overall_score,
        report.match_rate,
        report.word_count,
        payload.role_preset or "-",
    )
    return report


@router.post("/scoring/ats", response_model=ScoreResponse)
@rate_limit()
def scoring_ats(request: Request, payload: ScoreRequest):
    _ = request
    return ScoreResponse(score=_score(payload))


@router.post("/scoring/ats/report", response_class=PlainTextResponse)
@rate_limit()
def scoring_ats_report(request: Request, payload: ScoreRequest):
    _ = request
    report_text = build_report_text(_score(payload))
    return PlainTextResponse(
        report_text,
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )


@router.get("/scoring/presets", response_model=RolePresetsResponse)
async def scoring_presets():
    return RolePresetsResponse.model_validate({"presets": list_role_presets()})


@router.post("/scoring/highlight", response_model=HighlightResponse)
@rate_limit()
def scoring_highlight(request: Request, payload: HighlightRequest):
    _ = request
    return HighlightResponse(segments=highlight_segments(payload.text, payload.terms))
