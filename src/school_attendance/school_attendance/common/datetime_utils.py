from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.constants import EPOCH_DISPLAY_DATE

_NON_DIGITS = re.compile(r"[^0-9]")
_NUMBER = re.compile(r"[0-9]+")


def parse_date(text: Optional[str]) -> Optional[date]:
    """Parse ``dd/mm/yyyy`` or ``yyyy-mm-dd`` into a date.

    Returns None instead of raising: callers treat None as "keep the last
    good value". Impossible days such as 31/02 are rejected, not normalized.
    """

    if not text or not isinstance(text, str):
        return None

    text = text.strip()
    if "/" in text:
        parts = text.split("/")
        if len(parts) != 3:
            return None
        day_s, month_s, year_s = parts
    elif "-" in text:
        parts = text.split("-")
        if len(parts) != 3:
            return None
        year_s, month_s, day_s = parts
    else:
        return None

    if not all(_NUMBER.fullmatch(token) for token in (day_s, month_s, year_s)):
        return None

    day, month, year = int(day_s), int(month_s), int(year_s)
    if not 1 <= month <= 12 or not 1 <= day <= 31 or year < 1:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Display form: dd/mm/yyyy, zero padded."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_store_date(value: date) -> str:
    """Absence-store form: yyyy-mm-dd."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def store_to_display(text: Optional[str]) -> str:
    parsed = parse_date(text) if text and "-" in text else None
    if not parsed:
        return EPOCH_DISPLAY_DATE
    return format_date(parsed)


def format_masked_input(raw: str) -> str:
    """Mask typed text as dd/mm/yyyy.

    Works on the whole current value, so reapplying it to its own output is a
    no-op.
    """

    digits = _NON_DIGITS.sub("", raw or "")[:8]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def today() -> date:
    """Current local date.

    Wrapped so tests can patch the clock.
    """
    return date.today()


def sunday_first_weekday(value: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7
