from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import parse_date
from ..core.constants import BIMESTER_KEYS
from .model import BimesterRange


def classify(day: Optional[date], ranges: Mapping[int, BimesterRange]) -> int:
    """Bimester number containing ``day``, or 0.

    Ranges are checked in ascending bimester number so overlapping
    configurations still classify deterministically.
    """

    if day is None:
        return 0
    for number in sorted(ranges):
        r = ranges[number]
        if r.is_well_formed and r.contains(day):
            return number
    return 0


def ranges_from_document(doc: Mapping[str, dict]) -> dict[int, BimesterRange]:
    """Build ranges from the stored academic-year document.

    Bimesters with missing or unparsable dates are skipped.
    """

    ranges: dict[int, BimesterRange] = {}
    for number, key in BIMESTER_KEYS.items():
        entry = doc.get(key) or {}
        start = parse_date(entry.get("startDate"))
        end = parse_date(entry.get("endDate"))
        if start and end:
            ranges[number] = BimesterRange(number=number, start=start, end=end)
    return ranges
