"""
Configuration for the loan schedule calculator.

Settings come from environment variables so the CLI and the web app can be
tuned without code changes.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

# =============================================================================
# DEFAULT LOAN INPUTS
# =============================================================================
# Pre-filled values for the web form and the CLI options.

DEFAULT_PRINCIPAL = "250000"
DEFAULT_RATE = "4.5"
DEFAULT_TERM = "360"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer; got {raw!r}") from exc


def get_log_level() -> str:
    return os.environ.get("LOAN_SCHEDULE_LOG_LEVEL", "WARNING").upper()


def get_preview_rows() -> int:
    """Number of schedule rows shown before the output is truncated."""
    return _int_from_env("LOAN_SCHEDULE_PREVIEW_ROWS", 120)


def get_port() -> int:
    return _int_from_env("LOAN_SCHEDULE_PORT", 8710)


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once, using ``level`` or the environment setting."""
    logging.basicConfig(level=(level or get_log_level()), format=LOG_FORMAT)
