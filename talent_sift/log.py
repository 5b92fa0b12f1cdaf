"""Logging setup shared by the Streamlit app and the CLI — stdlib only."""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_NOISY = ("urllib3", "charset_normalizer", "watchdog")
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; installs handlers on the first call only."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def _log_dir() -> Path:
    override = os.environ.get("TALENT_SIFT_LOG_DIR", "").strip()
    return Path(override) if override else _DEFAULT_LOG_DIR


def _configure() -> None:
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)

    root = logging.getLogger()
    root.setLevel(level)
    for name in _NOISY:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # Streamlit reruns the script on every interaction; handlers must be added once.
    if any(getattr(h, "_talent_sift", False) for h in root.handlers):
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    console._talent_sift = True  # type: ignore[attr-defined]
    root.addHandler(console)

    if os.environ.get("TALENT_SIFT_NO_LOG_FILE"):
        return
    try:
        log_dir = _log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / f"talent_sift_{date.today():%Y-%m-%d}.log", encoding="utf-8")
    except OSError:
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    fh._talent_sift = True  # type: ignore[attr-defined]
    root.addHandler(fh)
