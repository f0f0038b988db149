from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        active_only = request.args.get("all") not in {"1", "true"}
        return jsonify([asdict(s) for s in service.list_roster(active_only=active_only)])

    @app.route("/api/students", methods=["POST"], endpoint="students_register")
    def students_register():
        body = request.get_json(silent=True) or {}
        student = service.register(
            name=str(body.get("name") or ""),
            turma=str(body.get("turma") or ""),
            status=str(body.get("status") or "ATIVO"),
            welfare_flag=bool(body.get("welfareFlag")),
            shift=body.get("shift"),
            student_id=body.get("studentId"),
        )
        return jsonify({"success": True, "student": asdict(student)}), 201
