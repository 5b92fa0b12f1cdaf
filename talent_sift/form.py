"""Job form: query-string defaults, validation and the outbound payload."""
from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import unquote

from bs4 import BeautifulSoup

from talent_sift.errors import ValidationError
from talent_sift.log import get_logger
from talent_sift.models import JobSubmission, JobType

log = get_logger(__name__)

NO_DESCRIPTION = "No description"

# Block-level tags get a trailing space so "<p>a</p><p>b</p>" reads "a b".
_BLOCK_TAGS = ("p", "div", "br", "li")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_safe(value: Any) -> str:
    """Percent-decode a query value; malformed input decodes to ''."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if not value:
        return ""
    text = str(value)
    if _BAD_ESCAPE.search(text):
        return ""
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return ""


def query_values(params: Any) -> dict[str, list[str]]:
    """Every value per key, so repeated params resolve to the first one.

    ``st.query_params`` indexes to the last value of a repeated key; its
    ``get_all`` keeps them all.
    """
    if hasattr(params, "get_all"):
        return {key: list(params.get_all(key)) for key in params}
    return {
        key: list(value) if isinstance(value, (list, tuple)) else [value]
        for key, value in params.items()
    }


def defaults_from_query(params: Mapping[str, Any]) -> JobSubmission:
    """Prefill a submission from URL parameters (jobtitle, yoe, jobtype, ...)."""
    job_type_label = decode_safe(params.get("jobtype")).strip()
    job_type = JobType.from_label(job_type_label)
    if job_type_label and job_type is None:
        log.debug("Ignoring unknown jobtype %r", job_type_label)

    return JobSubmission(
        job_title=decode_safe(params.get("jobtitle")),
        years_of_experience=decode_safe(params.get("yoe")),
        job_type=job_type,
        required_skills=decode_safe(params.get("skills")),
        job_description=decode_safe(params.get("job")),
        source=decode_safe(params.get("source")),
    )


def strip_html(html: str | None) -> str:
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.append(" ")
    return soup.get_text().strip()


def validate(submission: JobSubmission) -> None:
    if (
        not submission.job_title
        or not submission.job_type
        or not submission.job_description
    ):
        raise ValidationError(
            "Please fill in all required fields before submitting.",
            title="Missing Information",
        )
    if not submission.resume_files:
        raise ValidationError(
            "Please upload at least one resume before submitting.",
            title="Missing Resume",
        )


def build_payload(submission: JobSubmission, org_id: int, workflow_id: str) -> dict[str, Any]:
    """JSON body for the multipart ``data`` part."""
    return {
        "org_id": int(org_id),
        "exe_name": submission.required_skills,
        "workflow_id": workflow_id,
        "job_description": strip_html(submission.job_description) or NO_DESCRIPTION,
        "source": submission.source or "",
    }
