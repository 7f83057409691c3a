import os
import sys
import unittest
from pathlib import Path

os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_ats.main import app  # noqa: E402


class ScoringApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resumeData": {
                "personalInfo": {
                    "fullName": "John Doe",
                    "email": "john@example.com",
                    "phone": "+1 555 222 1111",
                    "summary": "Backend engineer building Python APIs and SQL data pipelines for SaaS products.",
                },
                "experience": [
                    {
                        "company": "Acme",
                        "position": "Backend Engineer",
                        "startDate": "2020-01",
                        "endDate": "Present",
                        "achievements": ["Built Python APIs with Docker and improved response time by 35%."],
                    }
                ],
                "education": [{"degree": "BSc", "institution": "State University", "startYear": "2014", "endYear": "2018"}],
                "skills": {"technical": ["Python", "SQL", "Docker"], "soft": []},
            },
            "jobDescription": "We need a Python backend engineer with SQL, Docker, and Kubernetes experience.",
        }

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_score_contract_shape(self):
        response = self.client.post("/v1/scoring/ats", json=self.payload)
        self.assertEqual(response.status_code, 200)
        score = response.json()["score"]

        self.assertTrue(0 <= score["overallScore"] <= 100)
        self.assertTrue(0 <= score["keywordScore"] <= 60)
        self.assertTrue(0 <= score["formattingScore"] <= 15)
        self.assertTrue(0.0 <= score["matchRate"] <= 1.0)
        self.assertIn("kubernetes", score["missingKeywords"])
        self.assertIn("python", score["matchedKeywords"])
        self.assertEqual(len(score["checklist"]), 10)
        self.assertEqual(set(score["checklist"][0]), {"label", "passed"})
        self.assertIsInstance(score["atsTips"], list)
        self.assertIsInstance(score["lengthWarnings"], list)

    def test_empty_job_description(self):
        payload = dict(self.payload)
        payload["jobDescription"] = "   "
        response = self.client.post("/v1/scoring/ats", json=payload)
        self.assertEqual(response.status_code, 200)
        score = response.json()["score"]
        self.assertEqual(score["overallScore"], 0)
        self.assertEqual(score["suggestions"], ["Paste a job description to get an ATS score."])

    def test_score_logs_summary_line(self):
        with self.assertLogs("resume_ats.api.v1.scoring", level="INFO") as captured:
            self.client.post("/v1/scoring/ats", json=self.payload)
        self.assertTrue(any("ats_score_computed" in line for line in captured.output))

    def test_unknown_role_preset_is_404(self):
        payload = dict(self.payload)
        payload["rolePreset"] = "Astronaut"
        response = self.client.post("/v1/scoring/ats", json=payload)
        self.assertEqual(response.status_code, 404)
        self.assertIn("Astronaut", response.json()["detail"])

    def test_known_role_preset_is_accepted(self):
        payload = dict(self.payload)
        payload["rolePreset"] = "Software Engineer"
        response = self.client.post("/v1/scoring/ats", json=payload)
        self.assertEqual(response.status_code, 200)

    def test_oversized_job_description_is_rejected(self):
        payload = dict(self.payload)
        payload["jobDescription"] = "python " * 10000
        response = self.client.post("/v1/scoring/ats", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_malformed_synonym_overrides_are_rejected(self):
        payload = dict(self.payload)
        payload["synonymOverrides"] = {"golang": "go"}
        response = self.client.post("/v1/scoring/ats", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_null_section_entries_are_accepted(self):
        response = self.client.post(
            "/v1/scoring/ats",
            json={"resumeData": {"experience": [None], "education": [None]}, "jobDescription": "python"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Add at least one experience entry.", response.json()["score"]["suggestions"])

    def test_report_download(self):
        response = self.client.post("/v1/scoring/ats/report", json=self.payload)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))
        self.assertIn('filename="ats-score-report.txt"', response.headers["content-disposition"])
        self.assertTrue(response.text.startswith("ATS Score Report\n"))
        self.assertIn("Missing keywords:", response.text)

    def test_presets_listing(self):
        response = self.client.get("/v1/scoring/presets")
        self.assertEqual(response.status_code, 200)
        presets = response.json()["presets"]
        labels = [preset["label"] for preset in presets]
        self.assertEqual(labels[0], "Software Engineer")
        self.assertIn("Custom", labels)
        self.assertEqual(presets[0]["synonyms"]["frontend"], ["front-end", "front end"])

    def test_highlight(self):
        response = self.client.post(
            "/v1/scoring/highlight",
            json={"text": "Python and SQL", "terms": ["python", "sql"]},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["segments"],
            [
                {"value": "Python", "highlight": True},
                {"value": " and ", "highlight": False},
                {"value": "SQL", "highlight": True},
            ],
        )

    def test_routes_registered(self):
        paths = set(app.openapi()["paths"])
        for path in (
            "/v1/health",
            "/v1/scoring/ats",
            "/v1/scoring/ats/report",
            "/v1/scoring/presets",
            "/v1/scoring/highlight",
        ):
            self.assertIn(path, paths)


class LifespanTests(unittest.TestCase):
    def test_startup_loads_config_and_taxonomy(self):
        with self.assertLogs("resume_ats.core.lifespan", level="INFO") as captured:
            with TestClient(app) as client:
                self.assertEqual(client.get("/v1/health").status_code, 200)
        self.assertTrue(any("ats_scoring_ready" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
