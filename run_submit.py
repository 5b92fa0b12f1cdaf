#!/usr/bin/env python3
"""Submit a job and resumes to the ranking service without the UI.

    python run_submit.py config/job.example.yaml resumes/*.pdf

Job fields come from a YAML file; every further argument is a resume file.
"""
from __future__ import annotations

import mimetypes
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from talent_sift.client import RankerClient
from talent_sift.config import load_job_file
from talent_sift.errors import SubmissionError, ValidationError
from talent_sift.filters import apply_filters
from talent_sift.log import get_logger
from talent_sift.models import FilterState, ResumeFile, SortKey
from talent_sift.results import ResultStore

log = get_logger(__name__)

TOP_N = 10


def _read_resume(path: Path) -> ResumeFile:
    mime, _ = mimetypes.guess_type(path.name)
    return ResumeFile(
        filename=path.name,
        content=path.read_bytes(),
        mime_type=mime or "application/octet-stream",
    )


def main(argv: list[str]) -> int:
    if len(argv) < 1 or argv[0] in ("-h", "--help"):
        print(__doc__)
        return 2

    job_path, *resume_args = argv
    try:
        submission = load_job_file(job_path)
    except (OSError, ValueError) as exc:
        log.error("Could not read job file %s: %s", job_path, exc)
        return 2

    missing = [p for p in resume_args if not Path(p).is_file()]
    if missing:
        log.error("Resume file(s) not found: %s", ", ".join(missing))
        return 2
    submission.resume_files = [_read_resume(Path(p)) for p in resume_args]

    try:
        payload = RankerClient.from_env().submit(submission)
    except (ValidationError, SubmissionError) as exc:
        log.error("%s: %s", exc.title, exc.description)
        return 1

    store = ResultStore({})
    store.save(payload, submission.required_skills)
    result = store.load_result()
    if result is None or not result.candidates:
        log.warning("Ranking service returned no candidates")
        return 0

    ranked = apply_filters(result.candidates, FilterState(score_range=(0, 10), sort=SortKey.SCORE))
    log.info("Case ID: %s", result.case_id if result.case_id is not None else "n/a")
    log.info("Key skills: %s", ", ".join(store.load_skills()) or "none")
    log.info("Top %d of %d candidate(s):", min(TOP_N, len(ranked)), len(result.candidates))
    for c in ranked[:TOP_N]:
        log.info(
            "  %5g  %-30s  %4g yrs  %s  %s",
            c.score, c.name[:30], c.experience, c.email, c.phone,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
