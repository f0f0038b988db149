from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, format_store_date
from ..container import Container
from ..core.constants import WEEKDAY_LABELS
from ..core.enums import AlertLevel, WindowMode
from ..core.exceptions import ValidationError
from ..reports.alerts import frequency_band
from .model import AbsenceEvent, AggregationFilter, StudentAggregate


def _student_json(a: StudentAggregate) -> dict:
    return {
        **asdict(a),
        "total": a.total,
        "band": frequency_band(a.attendance_percent).value,
    }


def _event_json(ev: AbsenceEvent) -> dict:
    return {
        "docId": ev.doc_id,
        "studentId": ev.student_id,
        "turma": ev.turma,
        "date": format_store_date(ev.day),
        "justified": ev.justified,
    }


def _parse_int_list(raw: str | None) -> list[int]:
    if not raw:
        return []
    try:
        return [int(x) for x in raw.split(",") if x.strip()]
    except ValueError:
        raise ValidationError(f"Lista inválida: {raw}") from None


def register(app: Flask, container: Container) -> None:
    service = container.analytics_service

    def _filter_from_request() -> AggregationFilter:
        try:
            mode = WindowMode(request.args.get("mode", WindowMode.NONE.value))
        except ValueError:
            raise ValidationError("Modo de período inválido") from None
        return service.build_filter(
            mode,
            selected=_parse_int_list(request.args.get("bimesters")),
            start_text=request.args.get("start", ""),
            end_text=request.args.get("end", ""),
            exclude_justified=request.args.get("excludeJustified") in {"1", "true"},
        )

    @app.route("/api/frequency", methods=["GET"], endpoint="frequency")
    def frequency():
        report = service.frequency(_filter_from_request())
        return jsonify(
            {
                "schoolDays": report.school_days,
                "students": [_student_json(a) for a in report.students],
                "bimesterTotals": report.bimester_totals,
                "kpis": asdict(report.kpis) if report.kpis else None,
            }
        )

    @app.route("/api/turmas", methods=["GET"], endpoint="turmas")
    def turmas():
        report = service.frequency(_filter_from_request())
        return jsonify([asdict(t) for t in report.turmas])

    @app.route("/api/alerts", methods=["GET"], endpoint="alerts")
    def alerts():
        levels = service.alerts(_filter_from_request())
        return jsonify(
            {
                "nearLimit": [_student_json(a) for a in levels[AlertLevel.NEAR_LIMIT]],
                "atRisk": [_student_json(a) for a in levels[AlertLevel.AT_RISK]],
            }
        )

    @app.route("/api/day-of-week", methods=["GET"], endpoint="day_of_week")
    def day_of_week():
        stats = service.day_of_week(_filter_from_request())

        def _buckets(counts):
            return [{"day": label, "absences": n} for label, n in zip(WEEKDAY_LABELS, counts)]

        return jsonify(
            {
                "overall": _buckets(stats.overall),
                "byTurma": {turma: _buckets(counts) for turma, counts in stats.by_turma.items()},
            }
        )

    @app.route("/api/heatmap", methods=["GET"], endpoint="heatmap")
    def heatmap():
        return jsonify(service.heatmap(_filter_from_request()))

    @app.route("/api/students/<student_id>/absences", methods=["GET"], endpoint="student_absences")
    def student_absences(student_id: str):
        by_bimester = service.student_absences(
            student_id, exclude_justified=request.args.get("excludeJustified") in {"1", "true"}
        )
        return jsonify({f"b{n}": [format_date(d) for d in days] for n, days in by_bimester.items()})

    @app.route("/api/duplicates", methods=["GET"], endpoint="duplicates")
    def duplicates():
        return jsonify([_event_json(ev) for ev in service.duplicates()])

    @app.route("/api/duplicates", methods=["POST"], endpoint="duplicates_remove")
    def duplicates_remove():
        removed = service.remove_duplicates()
        return jsonify({"success": True, "removed": removed})

    @app.route("/api/reports/welfare.csv", methods=["GET"], endpoint="welfare_report_csv")
    def welfare_report_csv():
        months = _parse_int_list(request.args.get("months")) or list(range(1, 13))
        csv_bytes = service.welfare_report_csv(months=months)
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=relatorio_bolsa_familia.csv"},
        )
