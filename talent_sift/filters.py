"""Client-side filtering and sorting of ranked candidates."""
from __future__ import annotations

import pandas as pd

from talent_sift.models import FilterState, RankedCandidate, SortKey

TABLE_COLUMNS: list[str] = [
    "candidate_id", "name", "score", "experience", "email", "phone", "justification",
]


def _ordered(bounds: tuple[float, float]) -> tuple[float, float]:
    lo, hi = bounds
    return (hi, lo) if lo > hi else (lo, hi)


def matches_search(candidate: RankedCandidate, query: str) -> bool:
    q = (query or "").lower().strip()
    if not q:
        return True
    return (
        q in candidate.name.lower()
        or (bool(candidate.email) and q in candidate.email.lower())
        or (bool(candidate.justification) and q in candidate.justification.lower())
    )


def in_score_range(candidate: RankedCandidate, lo: float, hi: float) -> bool:
    lo, hi = _ordered((lo, hi))
    return lo <= (candidate.score or 0) <= hi


def in_experience_range(candidate: RankedCandidate, lo: float, hi: float) -> bool:
    lo, hi = _ordered((lo, hi))
    return lo <= candidate.experience <= hi


def has_contacts(
    candidate: RankedCandidate, require_email: bool = False, require_phone: bool = False
) -> bool:
    if require_email and not candidate.has_email:
        return False
    if require_phone and not candidate.has_phone:
        return False
    return True


def _sort(candidates: list[RankedCandidate], key: SortKey) -> list[RankedCandidate]:
    # sorted() is stable, so ties keep the order the service returned.
    if key == SortKey.SCORE:
        return sorted(candidates, key=lambda c: c.score, reverse=True)
    if key == SortKey.EXPERIENCE:
        return sorted(candidates, key=lambda c: c.experience, reverse=True)
    if key == SortKey.NAME:
        return sorted(candidates, key=lambda c: c.name.lower())
    return list(candidates)


def apply_filters(
    candidates: list[RankedCandidate], state: FilterState | None = None
) -> list[RankedCandidate]:
    state = state or FilterState()
    score_lo, score_hi = state.score_range
    exp_lo, exp_hi = state.experience_range
    kept = [
        c for c in candidates
        if matches_search(c, state.query)
        and in_score_range(c, score_lo, score_hi)
        and in_experience_range(c, exp_lo, exp_hi)
        and has_contacts(c, state.require_email, state.require_phone)
    ]
    return _sort(kept, SortKey(state.sort))


def to_dataframe(candidates: list[RankedCandidate]) -> pd.DataFrame:
    """Tabular view of candidates for display and CSV export."""
    rows = [{col: getattr(c, col) for col in TABLE_COLUMNS} for c in candidates]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
