"""Data models for job submissions and ranked candidates."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NO_EMAIL = "No email"
NO_PHONE = "No phone"

SCORE_BOUNDS: tuple[int, int] = (1, 10)
EXPERIENCE_BOUNDS: tuple[int, int] = (0, 35)


class JobType(str, Enum):
    FULLTIME = "fulltime"
    PARTTIME = "parttime"
    CONTRACT = "contract"
    FREELANCE = "freelance"
    INTERNSHIP = "internship"

    @property
    def label(self) -> str:
        return _JOB_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str | None) -> JobType | None:
        """Map a display label such as ``Full time`` to its member."""
        text = (label or "").strip()
        for member, member_label in _JOB_TYPE_LABELS.items():
            if member_label == text:
                return member
        return None


_JOB_TYPE_LABELS: dict[JobType, str] = {
    JobType.FULLTIME: "Full time",
    JobType.PARTTIME: "Part time",
    JobType.CONTRACT: "Contract",
    JobType.FREELANCE: "Freelance",
    JobType.INTERNSHIP: "Internship",
}


@dataclass
class ResumeFile:
    filename: str
    content: bytes
    mime_type: str = "application/octet-stream"


@dataclass
class JobSubmission:
    job_title: str = ""
    years_of_experience: str = ""
    job_type: JobType | None = None
    industry: str = ""
    required_skills: str = ""
    job_description: str = ""
    resume_files: list[ResumeFile] = field(default_factory=list)
    source: str = ""

    def key_skills(self) -> list[str]:
        return [s.strip() for s in self.required_skills.split(",") if s.strip()]


@dataclass
class RankedCandidate:
    candidate_id: int
    name: str
    score: float = 0
    justification: str = ""
    experience: float = 0
    email: str = NO_EMAIL
    phone: str = NO_PHONE
    case_id: str | int | None = None
    exe_name: str | None = None

    @property
    def has_email(self) -> bool:
        return bool(self.email) and self.email != NO_EMAIL

    @property
    def has_phone(self) -> bool:
        return bool(self.phone) and self.phone != NO_PHONE


@dataclass
class SubmissionResult:
    case_id: str | int | None
    exe_name: str | None
    candidates: list[RankedCandidate] = field(default_factory=list)


class SortKey(str, Enum):
    UPSTREAM = "upstream"
    SCORE = "score"
    EXPERIENCE = "experience"
    NAME = "name"


@dataclass
class FilterState:
    score_range: tuple[float, float] = SCORE_BOUNDS
    experience_range: tuple[float, float] = EXPERIENCE_BOUNDS
    query: str = ""
    require_email: bool = False
    require_phone: bool = False
    sort: SortKey = SortKey.UPSTREAM
