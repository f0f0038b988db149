from __future__ import annotations

from enum import Enum


class StudentStatus(str, Enum):
    """Situação da matrícula do estudante."""

    ACTIVE = "ATIVO"
    TRANSFERRED = "TRANSFERIDO"
    INACTIVE = "INATIVO"


class SchoolShift(str, Enum):
    MORNING = "MANHÃ"
    AFTERNOON = "TARDE"


class CalendarSyncState(str, Enum):
    """Who owns a bimester's day list.

    SYNCED: days are derived from start/end and follow persisted reloads.
    DIVERGED: the user edited something; the day list is authoritative and is
    rebuilt only on an explicit start/end edit.
    """

    SYNCED = "SYNCED"
    DIVERGED = "DIVERGED"


class AlertLevel(str, Enum):
    REGULAR = "REGULAR"
    NEAR_LIMIT = "NEAR_LIMIT"
    AT_RISK = "AT_RISK"


class FrequencyBand(str, Enum):
    GOOD = "GOOD"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class WindowMode(str, Enum):
    """How the analysis date window is chosen on the dashboard."""

    TODAY = "today"
    CUSTOM = "custom"
    BIMESTERS = "bimesters"
    NONE = "none"
