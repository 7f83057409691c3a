from __future__ import annotations

from resume_ats.schemas.scoring import ScoreReport

REPORT_FILENAME = "ats-score-report.txt"


def _format_percent(value: float) -> str:
    return f"{int(value * 100 + 0.5)}%"


def build_report_text(report: ScoreReport) -> str:
    """Render a score report as the downloadable plain-text summary."""
    lines = [
        "ATS Score Report",
        f"Score: {report.overall_score}/100",
        f"Keyword match: {_format_percent(report.match_rate)}",
        f"Word count: {report.word_count}",
        "Breakdown:",
        f"- Keyword match: {report.keyword_score}/60",
        f"- Completeness: {report.completeness_score}/25",
        f"- Formatting: {report.formatting_score}/15",
        "",
        "Checklist:",
        *(f"- {'PASS' if item.passed else 'WARN'}: {item.label}" for item in report.checklist),
        "",
        "Suggestions:",
        *(f"- {item}" for item in report.suggestions),
    ]

    if report.length_warnings:
        lines.extend(["", "Length warnings:", *(f"- {item}" for item in report.length_warnings)])
    if report.ats_tips:
        lines.extend(["", "ATS tips:", *(f"- {item}" for item in report.ats_tips)])

    # Keyword sections are comma-joined single lines.
    for title, terms in (
        ("Missing keywords:", report.missing_keywords),
        ("Missing key phrases:", report.missing_phrases),
        ("Matched keywords:", report.matched_keywords),
        ("Matched key phrases:", report.matched_phrases),
    ):
        if terms:
            lines.extend(["", title, ", ".join(terms)])

    return "\n".join(lines)
