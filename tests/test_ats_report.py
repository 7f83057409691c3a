import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas.scoring import ChecklistItem, ScoreReport  # noqa: E402
from resume_ats.services.ats_report import REPORT_FILENAME, build_report_text  # noqa: E402


class ReportTextTests(unittest.TestCase):
    def setUp(self):
        self.report = ScoreReport(
            overall_score=43,
            keyword_score=8,
            completeness_score=25,
            formatting_score=10,
            match_rate=0.125,
            word_count=320,
            matched_keywords=["python"],
            missing_keywords=["kubernetes", "terraform"],
            checklist=[
                ChecklistItem(label="Email included", passed=True),
                ChecklistItem(label="Phone number included", passed=False),
            ],
            suggestions=["Add more keywords from the job description."],
            ats_tips=["Avoid icons or graphics in the content."],
        )

    def test_header_and_breakdown(self):
        lines = build_report_text(self.report).splitlines()
        self.assertEqual(
            lines[:8],
            [
                "ATS Score Report",
                "Score: 43/100",
                "Keyword match: 13%",
                "Word count: 320",
                "Breakdown:",
                "- Keyword match: 8/60",
                "- Completeness: 25/25",
                "- Formatting: 10/15",
            ],
        )

    def test_checklist_marks_pass_and_warn(self):
        text = build_report_text(self.report)
        self.assertIn("- PASS: Email included", text)
        self.assertIn("- WARN: Phone number included", text)

    def test_keyword_sections_are_comma_joined_and_skipped_when_empty(self):
        text = build_report_text(self.report)
        self.assertIn("Missing keywords:\nkubernetes, terraform", text)
        self.assertIn("Matched keywords:\npython", text)
        self.assertNotIn("Missing key phrases:", text)
        self.assertNotIn("Matched key phrases:", text)
        self.assertNotIn("Length warnings:", text)
        self.assertIn("ATS tips:\n- Avoid icons or graphics in the content.", text)

    def test_empty_report_still_renders(self):
        text = build_report_text(ScoreReport(suggestions=["Paste a job description to get an ATS score."]))
        self.assertTrue(text.startswith("ATS Score Report\nScore: 0/100\nKeyword match: 0%"))
        self.assertTrue(text.endswith("Suggestions:\n- Paste a job description to get an ATS score."))

    def test_filename(self):
        self.assertEqual(REPORT_FILENAME, "ats-score-report.txt")


if __name__ == "__main__":
    unittest.main()
