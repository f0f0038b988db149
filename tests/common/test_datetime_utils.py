from datetime import date

import pytest

from src.school_attendance.school_attendance.common.datetime_utils import (
    format_date,
    format_masked_input,
    format_store_date,
    parse_date,
    store_to_display,
    sunday_first_weekday,
)


def test_parse_accepts_both_formats():
    assert parse_date("05/02/2025") == date(2025, 2, 5)
    assert parse_date("2025-02-05") == date(2025, 2, 5)
    assert parse_date(" 5/2/2025 ") == date(2025, 2, 5)


@pytest.mark.parametrize(
    "text",
    [None, "", "05/02", "05/02/2025/1", "aa/02/2025", "05/13/2025", "32/01/2025", "00/01/2025", "2025.02.05", "31/02/2025"],
)
def test_parse_rejects_without_raising(text):
    assert parse_date(text) is None


def test_format_round_trip():
    assert format_date(date(2025, 2, 5)) == "05/02/2025"
    assert format_date(parse_date("09/11/2024")) == "09/11/2024"
    assert parse_date(format_date(date(2024, 2, 29))) == date(2024, 2, 29)


def test_store_date_forms():
    assert format_store_date(date(2025, 2, 5)) == "2025-02-05"
    assert store_to_display("2025-02-05") == "05/02/2025"
    assert store_to_display("garbage") == "01/01/1970"
    assert store_to_display(None) == "01/01/1970"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("0", "0"),
        ("05", "05"),
        ("050", "05/0"),
        ("0502", "05/02"),
        ("05022", "05/02/2"),
        ("05022025", "05/02/2025"),
        ("0502202599", "05/02/2025"),
        ("ab05-02x", "05/02"),
    ],
)
def test_masked_input(raw, expected):
    assert format_masked_input(raw) == expected


def test_masked_input_is_idempotent():
    once = format_masked_input("0502202")
    assert format_masked_input(once) == once


def test_sunday_first_weekday():
    assert sunday_first_weekday(date(2025, 2, 2)) == 0  # Sunday
    assert sunday_first_weekday(date(2025, 2, 5)) == 3  # Wednesday
    assert sunday_first_weekday(date(2025, 2, 8)) == 6  # Saturday
