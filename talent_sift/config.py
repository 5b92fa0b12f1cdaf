"""Load env configuration and job files."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from talent_sift.log import get_logger
from talent_sift.models import JobSubmission, JobType

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
EXAMPLE_JOB_PATH: Path = CONFIG_DIR / "job.example.yaml"

DEFAULT_API_URL = "https://agentic-ai.co.in/api/agentic-ai/workflow-exe"
DEFAULT_ORG_ID = 1
DEFAULT_WORKFLOW_ID = "resume_ranker"
DEFAULT_TIMEOUT = 120.0

# Job file keys may use either the field names or the URL query aliases.
_JOB_KEY_ALIASES: dict[str, str] = {
    "jobtitle": "job_title",
    "title": "job_title",
    "yoe": "years_of_experience",
    "jobtype": "job_type",
    "skills": "required_skills",
    "job": "job_description",
    "description": "job_description",
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _env_number(key: str, default: float, cast: type) -> Any:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        log.warning("Invalid %s=%r, using default %s", key, raw, default)
        return default


def api_url() -> str:
    return get_env("RANKER_API_URL") or DEFAULT_API_URL


def org_id() -> int:
    return _env_number("RANKER_ORG_ID", DEFAULT_ORG_ID, int)


def workflow_id() -> str:
    return get_env("RANKER_WORKFLOW_ID") or DEFAULT_WORKFLOW_ID


def request_timeout() -> float:
    return _env_number("RANKER_TIMEOUT", DEFAULT_TIMEOUT, float)


def _parse_job_type(value: Any) -> JobType | None:
    if isinstance(value, JobType) or value is None:
        return value
    text = str(value).strip()
    try:
        return JobType(text.lower())
    except ValueError:
        return JobType.from_label(text)


def load_job_file(path: str | Path) -> JobSubmission:
    """Read a YAML job file into a submission without resume files."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    fields: dict[str, Any] = {}
    for key, value in data.items():
        name = _JOB_KEY_ALIASES.get(str(key).lower(), str(key))
        fields[name] = value

    skills = fields.get("required_skills", "")
    if isinstance(skills, list):
        skills = ", ".join(str(s) for s in skills)

    yoe = fields.get("years_of_experience", "")
    return JobSubmission(
        job_title=str(fields.get("job_title") or ""),
        years_of_experience="" if yoe is None else str(yoe),
        job_type=_parse_job_type(fields.get("job_type")),
        industry=str(fields.get("industry") or ""),
        required_skills=str(skills or ""),
        job_description=str(fields.get("job_description") or ""),
        source=str(fields.get("source") or ""),
    )
