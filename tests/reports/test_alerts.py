from src.school_attendance.school_attendance.absences.model import StudentAggregate
from src.school_attendance.school_attendance.core.enums import AlertLevel, FrequencyBand
from src.school_attendance.school_attendance.reports.alerts import alert_level, compute_kpis, frequency_band, students_at


def _agg(student_id, total, absence_percent, school_days=20):
    return StudentAggregate(
        student_id=student_id,
        turma="9A",
        name=student_id,
        b1=total,
        b2=0,
        b3=0,
        b4=0,
        school_days=school_days,
        absence_percent=absence_percent,
        attendance_percent=100.0 - absence_percent,
    )


def test_alert_levels():
    assert alert_level(19.9) is AlertLevel.REGULAR
    assert alert_level(20.0) is AlertLevel.NEAR_LIMIT
    assert alert_level(24.9) is AlertLevel.NEAR_LIMIT
    assert alert_level(25.0) is AlertLevel.AT_RISK


def test_frequency_bands():
    assert frequency_band(81.0) is FrequencyBand.GOOD
    assert frequency_band(80.0) is FrequencyBand.WARNING
    assert frequency_band(75.0) is FrequencyBand.WARNING
    assert frequency_band(74.9) is FrequencyBand.CRITICAL


def test_students_at_level_sorted_worst_first():
    aggs = [_agg("a", 6, 30.0), _agg("b", 4, 20.0), _agg("c", 8, 40.0), _agg("d", 0, 0.0)]

    assert [a.student_id for a in students_at(AlertLevel.AT_RISK, aggs)] == ["c", "a"]
    assert [a.student_id for a in students_at(AlertLevel.NEAR_LIMIT, aggs)] == ["b"]


def test_kpis():
    aggs = [_agg("a", 6, 30.0), _agg("b", 4, 20.0), _agg("c", 0, 0.0)]
    kpis = compute_kpis(aggs, 20)

    assert (kpis.total_students, kpis.compliant, kpis.near_limit, kpis.at_risk) == (3, 2, 1, 1)
    assert kpis.percent_compliant == 66.7
    assert kpis.mean_absences_per_school_day == 0.5


def test_kpis_without_students_or_days():
    kpis = compute_kpis([], 0)
    assert kpis.percent_compliant == 0.0
    assert kpis.mean_absences_per_school_day == 0.0
