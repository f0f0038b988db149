from datetime import date

from src.school_attendance.school_attendance.academic_year.classifier import classify, ranges_from_document
from src.school_attendance.school_attendance.academic_year.model import BimesterRange


RANGES = {
    1: BimesterRange(1, date(2025, 2, 3), date(2025, 4, 11)),
    2: BimesterRange(2, date(2025, 4, 14), date(2025, 7, 11)),
}


def test_classify_inside_ranges_and_boundaries():
    assert classify(date(2025, 2, 3), RANGES) == 1
    assert classify(date(2025, 4, 11), RANGES) == 1
    assert classify(date(2025, 4, 14), RANGES) == 2


def test_classify_outside_every_range_is_zero():
    assert classify(date(2025, 4, 12), RANGES) == 0
    assert classify(date(2025, 1, 1), RANGES) == 0
    assert classify(None, RANGES) == 0


def test_overlapping_ranges_resolve_by_ascending_number():
    overlapping = {
        2: BimesterRange(2, date(2025, 3, 1), date(2025, 4, 30)),
        1: BimesterRange(1, date(2025, 2, 1), date(2025, 3, 31)),
    }
    assert classify(date(2025, 3, 15), overlapping) == 1
    assert classify(date(2025, 4, 15), overlapping) == 2


def test_malformed_range_never_matches():
    broken = {1: BimesterRange(1, date(2025, 4, 1), date(2025, 3, 1))}
    assert classify(date(2025, 3, 15), broken) == 0


def test_ranges_from_document_skips_incomplete_bimesters():
    doc = {
        "1º Bimestre": {"startDate": "03/02/2025", "endDate": "11/04/2025", "dates": []},
        "2º Bimestre": {"startDate": "14/04/2025", "endDate": "", "dates": []},
        "3º Bimestre": {"startDate": "2025-07-28", "endDate": "03/10/2025"},
    }
    ranges = ranges_from_document(doc)

    assert sorted(ranges) == [1, 3]
    assert ranges[3].start == date(2025, 7, 28)
