"""HTTP client for the remote resume-ranking workflow.

The service takes one multipart POST: a ``data`` part holding the job as
JSON and one ``resumes`` part per file. Ranking happens server-side; the
response carries the ranked candidates under ``data.result``.
"""
from __future__ import annotations

import json
import time
from typing import Any

import requests

from talent_sift import config
from talent_sift.errors import SubmissionError
from talent_sift.form import build_payload, validate
from talent_sift.log import get_logger
from talent_sift.models import JobSubmission, ResumeFile
from talent_sift.retry import retry

log = get_logger(__name__)


def _files_part(files: list[ResumeFile]) -> list[tuple[str, tuple[str, bytes, str]]]:
    return [
        ("resumes", (f.filename, f.content, f.mime_type))
        for f in files
        if isinstance(f, ResumeFile)
    ]


class RankerClient:
    def __init__(
        self,
        base_url: str = config.DEFAULT_API_URL,
        *,
        org_id: int = config.DEFAULT_ORG_ID,
        workflow_id: str = config.DEFAULT_WORKFLOW_ID,
        timeout: float = config.DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.org_id = org_id
        self.workflow_id = workflow_id
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> RankerClient:
        return cls(
            config.api_url(),
            org_id=config.org_id(),
            workflow_id=config.workflow_id(),
            timeout=config.request_timeout(),
        )

    # A connect timeout means nothing was sent, so one retry can't start a duplicate run.
    @retry(max_attempts=2, base_delay=1.5, retryable=(requests.ConnectTimeout,))
    def _post(self, data: dict[str, str], files: list) -> requests.Response:
        return requests.post(self.base_url, data=data, files=files, timeout=self.timeout)

    def submit(self, submission: JobSubmission, *, org_id: int | None = None) -> Any:
        """Upload the job and resumes; return the ``data.result`` payload.

        Raises ``ValidationError`` before any network traffic when required
        fields are missing, and ``SubmissionError`` for transport or server
        failures.
        """
        validate(submission)
        payload = build_payload(
            submission,
            org_id=self.org_id if org_id is None else org_id,
            workflow_id=self.workflow_id,
        )
        files = _files_part(submission.resume_files)
        log.info(
            "Submitting %r with %d resume(s) to %s",
            submission.job_title, len(files), self.base_url,
        )

        started = time.monotonic()
        try:
            response = self._post({"data": json.dumps(payload)}, files)
        except requests.RequestException as exc:
            log.error("Ranking request failed: %s", exc)
            raise SubmissionError(str(exc) or "Could not reach the ranking service") from exc
        elapsed = time.monotonic() - started

        try:
            body = response.json()
        except ValueError as exc:
            log.error("Non-JSON response (status %d) after %.1fs", response.status_code, elapsed)
            raise SubmissionError(
                "Server did not return JSON", status_code=response.status_code
            ) from exc

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            log.error("Ranking service returned %d: %s", response.status_code, message)
            raise SubmissionError(
                message or f"Upload failed with status {response.status_code}",
                status_code=response.status_code,
            )

        data = body.get("data") if isinstance(body, dict) else None
        result = data.get("result") if isinstance(data, dict) else None
        if not result:
            log.warning("Response had no data.result; treating as empty")
            result = []
        log.info("Ranking completed in %.1fs", elapsed)
        return result
