"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BIMESTERS = (1, 2, 3, 4)

# Keys of the academic-year configuration document.
BIMESTER_KEYS = {
    1: "1º Bimestre",
    2: "2º Bimestre",
    3: "3º Bimestre",
    4: "4º Bimestre",
}

# Sunday-first, matching the day-of-week buckets.
WEEKDAY_LABELS = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")

NEAR_LIMIT_ABSENCE_PERCENT = 20.0
AT_RISK_ABSENCE_PERCENT = 25.0

GOOD_FREQUENCY_PERCENT = 81.0
WARNING_FREQUENCY_PERCENT = 75.0

EPOCH_DISPLAY_DATE = "01/01/1970"

DEFAULT_SCHOOL_YEAR = 2025
