"""Talent Sift Lite: job submission, ranked-candidate caching and filtering."""

__version__ = "0.1.0"
