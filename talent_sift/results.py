"""Map ranking responses to candidates and cache them in session storage."""
from __future__ import annotations

import json
from typing import Any, MutableMapping

from talent_sift.log import get_logger
from talent_sift.models import NO_EMAIL, NO_PHONE, RankedCandidate, SubmissionResult

log = get_logger(__name__)

RESULTS_KEY = "resume_results"
SKILLS_KEY = "key_skills"
ORG_ID_KEY = "org_id"

# Upstream masks unknown contact details with this placeholder.
_MASKED = "xxx"


def _number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0
    if num != num:  # NaN
        return 0
    return int(num) if num.is_integer() else num


def _contact(value: Any, placeholder: str) -> str:
    if not value or value == _MASKED:
        return placeholder
    return str(value)


def map_candidates(payload: Any) -> SubmissionResult:
    """Turn the cached ``data.result`` object into display-ready candidates.

    Expected shape: ``{"id": ..., "exe_name": ..., "result": [item, ...]}``.
    A bare list of items is accepted as well (no case id).
    """
    if isinstance(payload, list):
        case_id, exe_name, items = None, None, payload
    elif isinstance(payload, dict) and isinstance(payload.get("result"), list):
        case_id, exe_name, items = payload.get("id"), payload.get("exe_name"), payload["result"]
    else:
        return SubmissionResult(case_id=None, exe_name=None)

    candidates: list[RankedCandidate] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            item = {}
        experience = item.get("experience")
        if isinstance(experience, bool) or not isinstance(experience, (int, float)):
            experience = 0
        candidates.append(
            RankedCandidate(
                candidate_id=index + 1,
                name=item.get("name") or f"Candidate {index + 1}",
                score=_number(item.get("score")),
                justification=item.get("justification") or "",
                experience=experience,
                email=_contact(item.get("email"), NO_EMAIL),
                phone=_contact(item.get("phone"), NO_PHONE),
                case_id=case_id,
                exe_name=exe_name,
            )
        )
    return SubmissionResult(case_id=case_id, exe_name=exe_name, candidates=candidates)


class ResultStore:
    """JSON-string cache over a mutable mapping such as ``st.session_state``."""

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self.storage = storage

    def _read_json(self, key: str) -> Any:
        raw = self.storage.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as exc:
            log.error("Discarding unreadable %s in session cache: %s", key, exc)
            return None

    def save(self, result_payload: Any, required_skills: str) -> None:
        self.storage[RESULTS_KEY] = json.dumps(result_payload or [])
        skills = [s.strip() for s in (required_skills or "").split(",") if s.strip()]
        self.storage[SKILLS_KEY] = json.dumps(skills)
        log.debug("Cached ranking result and %d key skill(s)", len(skills))

    def load_result(self) -> SubmissionResult | None:
        payload = self._read_json(RESULTS_KEY)
        if payload is None:
            return None
        if not isinstance(payload, list) and not (
            isinstance(payload, dict) and isinstance(payload.get("result"), list)
        ):
            log.warning("Cached result has no candidate list")
            return None
        return map_candidates(payload)

    def load_skills(self) -> list[str]:
        skills = self._read_json(SKILLS_KEY)
        if not isinstance(skills, list):
            return []
        return [str(s) for s in skills]

    def org_id(self, default: int) -> int:
        raw = self.storage.get(ORG_ID_KEY)
        try:
            return int(raw) if raw not in (None, "") else default
        except (TypeError, ValueError):
            return default

    def set_org_id(self, value: int) -> None:
        self.storage[ORG_ID_KEY] = str(int(value))

    def clear(self) -> None:
        for key in (RESULTS_KEY, SKILLS_KEY):
            if key in self.storage:
                del self.storage[key]
