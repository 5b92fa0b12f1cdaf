"""Shared fixtures for the Talent Sift tests."""

import os

os.environ.setdefault("TALENT_SIFT_NO_LOG_FILE", "1")

import pytest

from talent_sift.models import JobSubmission, JobType, ResumeFile

_RANKER_VARS = ("RANKER_API_URL", "RANKER_ORG_ID", "RANKER_WORKFLOW_ID", "RANKER_TIMEOUT")


class FakeResponse:
    """Just enough of ``requests.Response`` for the client."""

    def __init__(self, status_code=200, body=None, *, json_error=False):
        self.status_code = status_code
        self._body = body
        self._json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


@pytest.fixture(autouse=True)
def _clean_ranker_env(monkeypatch):
    for var in _RANKER_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def resume():
    return ResumeFile("jane_doe.pdf", b"%PDF-1.4 fake", "application/pdf")


@pytest.fixture
def submission(resume):
    return JobSubmission(
        job_title="Backend Engineer",
        years_of_experience="4",
        job_type=JobType.FULLTIME,
        industry="SaaS",
        required_skills="Python, Django,PostgreSQL",
        job_description="<p>Build <b>APIs</b></p><ul><li>Django</li><li>Celery</li></ul>",
        resume_files=[resume],
        source="careers-page",
    )


@pytest.fixture
def fake_response():
    return FakeResponse
