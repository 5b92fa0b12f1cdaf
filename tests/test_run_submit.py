import pytest

import run_submit
from talent_sift.errors import SubmissionError


class StubClient:
    def __init__(self, outcome):
        self.outcome = outcome
        self.submitted = []

    def submit(self, submission):
        self.submitted.append(submission)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def job_file(tmp_path):
    path = tmp_path / "job.yaml"
    path.write_text(
        "job_title: Platform Engineer\njob_type: Full time\nskills: Go, Kubernetes\n"
        "job_description: Run the platform\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def resume_path(tmp_path):
    path = tmp_path / "alex.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


def _use_client(monkeypatch, stub):
    monkeypatch.setattr(run_submit.RankerClient, "from_env", classmethod(lambda cls: stub))


def test_usage_errors(job_file, tmp_path):
    assert run_submit.main([]) == 2
    assert run_submit.main(["--help"]) == 2
    assert run_submit.main([str(tmp_path / "missing.yaml")]) == 2
    assert run_submit.main([str(job_file), str(tmp_path / "missing.pdf")]) == 2


def test_successful_submission(monkeypatch, job_file, resume_path):
    stub = StubClient({
        "id": 5,
        "result": [{"name": "Alex", "score": 7, "experience": 4, "email": "alex@example.com"}],
    })
    _use_client(monkeypatch, stub)

    assert run_submit.main([str(job_file), str(resume_path)]) == 0
    sent = stub.submitted[0]
    assert sent.job_title == "Platform Engineer"
    assert [f.filename for f in sent.resume_files] == ["alex.pdf"]
    assert sent.resume_files[0].mime_type == "application/pdf"
    assert sent.resume_files[0].content == b"%PDF-1.4"


def test_empty_result_is_not_an_error(monkeypatch, job_file, resume_path):
    _use_client(monkeypatch, StubClient({}))
    assert run_submit.main([str(job_file), str(resume_path)]) == 0


def test_submission_failure(monkeypatch, job_file, resume_path):
    _use_client(monkeypatch, StubClient(SubmissionError("Upload failed with status 500")))
    assert run_submit.main([str(job_file), str(resume_path)]) == 1
