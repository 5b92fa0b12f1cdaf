"""Exceptions raised by form validation and the ranking client."""
from __future__ import annotations


class TalentSiftError(Exception):
    """Base error; ``title`` is the short heading shown in the UI."""

    title = "Error"

    def __init__(self, description: str, *, title: str | None = None) -> None:
        super().__init__(description)
        self.description = description
        if title is not None:
            self.title = title


class ValidationError(TalentSiftError):
    title = "Missing Information"


class SubmissionError(TalentSiftError):
    title = "Submission Error"

    def __init__(self, description: str, *, status_code: int | None = None) -> None:
        super().__init__(description)
        self.status_code = status_code
