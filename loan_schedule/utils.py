"""Utility functions for the loan schedule calculator.

This module turns the free-text values typed into a form or passed on the
command line into the numbers the engine works with. Parsing errors raise
``ValueError``; checking that a parsed number is a sensible loan input is left
to the engine.
"""

from __future__ import annotations

import re
from typing import Optional

_YEARS_SUFFIX = re.compile(r"^(?P<value>\d+)\s*(y|yr|yrs|year|years)$")


def _clean(value: str) -> str:
    return value.strip().lower().replace(",", "").replace("_", "")


def parse_amount(value: str) -> float:
    """Parse a loan amount string.

    Accepts plain numbers ("250000"), thousands separators ("250,000"), a
    leading dollar sign (after an optional sign, as in "-$5") and shorthand
    with ``k``/``m`` suffixes (e.g. "250k" meaning 250_000). Returns a float.

    Raises
    ------
    ValueError
        If the string is not a number.
    """
    cleaned = _clean(value)
    sign = ""
    if cleaned[:1] in ("-", "+"):
        sign, cleaned = cleaned[0], cleaned[1:].lstrip()
    cleaned = sign + cleaned.lstrip("$").strip()
    factor = 1.0
    if cleaned.endswith("k"):
        factor = 1_000.0
        cleaned = cleaned[:-1]
    elif cleaned.endswith("m"):
        factor = 1_000_000.0
        cleaned = cleaned[:-1]
    try:
        return float(cleaned) * factor
    except ValueError as exc:
        raise ValueError(f"Invalid amount: {value}") from exc


def parse_rate(value: str) -> float:
    """Parse an annual interest rate in percent ("4.5" or "4.5%")."""
    cleaned = _clean(value)
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1].strip()
    try:
        return float(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid interest rate: {value}") from exc


def parse_term(value: str) -> int:
    """Parse a loan term into months.

    A bare number is a count of months ("360"). A number followed by a year
    suffix ("30y", "30 years") is converted to months.
    """
    cleaned = _clean(value)
    match = _YEARS_SUFFIX.match(cleaned)
    if match:
        return int(match.group("value")) * 12
    try:
        return int(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid loan term: {value}") from exc


def years_label(term_months: Optional[int]) -> str:
    """Return the term rounded to whole years, e.g. ``"30 years"``.

    Returns an empty string when no term is given.
    """
    if not term_months:
        return ""
    return f"{round(term_months / 12)} years"
