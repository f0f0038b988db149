from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, parse_date
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.academic_year_service

    @app.route("/api/academic-year", methods=["GET"], endpoint="academic_year_get")
    def academic_year_get():
        academic_year = service.get()
        totals = service.school_day_totals(academic_year=academic_year)
        return jsonify(
            {
                "year": academic_year.year,
                "document": service.to_document(academic_year),
                "schoolDays": {
                    "b1": totals.b1,
                    "b2": totals.b2,
                    "b3": totals.b3,
                    "b4": totals.b4,
                    "annual": totals.annual,
                },
            }
        )

    @app.route("/api/academic-year", methods=["PUT"], endpoint="academic_year_put")
    def academic_year_put():
        academic_year = service.save_document(request.get_json(silent=True))
        return jsonify({"success": True, "document": service.to_document(academic_year)})

    @app.route("/api/academic-year/bimesters/<int:number>", methods=["PATCH"], endpoint="academic_year_bimester")
    def academic_year_bimester(number: int):
        body = request.get_json(silent=True) or {}
        toggles = body.get("toggle") or []
        if not isinstance(toggles, list):
            raise ValidationError("toggle deve ser uma lista de datas")
        config = service.edit_bimester(
            number,
            start=body.get("startDate"),
            end=body.get("endDate"),
            toggle_dates=[str(t) for t in toggles],
        )
        return jsonify({"success": True, "bimester": number, **service.bimester_document(config)})

    @app.route("/api/academic-year/school-days", methods=["GET"], endpoint="academic_year_school_days")
    def academic_year_school_days():
        start = parse_date(request.args.get("start"))
        end = parse_date(request.args.get("end"))
        if not start or not end:
            raise ValidationError("Informe start e end (dd/mm/aaaa)")
        totals = service.school_day_totals(window_start=start, window_end=end)
        return jsonify({"start": format_date(start), "end": format_date(end), "schoolDays": totals.in_window})
