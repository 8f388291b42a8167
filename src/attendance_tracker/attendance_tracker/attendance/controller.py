from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/attendance", methods=["GET"], endpoint="all_attendance")
    def all_attendance():
        return jsonify(container.attendance_service.get_all())

    @app.route("/attendance/<emp_id>/<work_date>", methods=["GET"], endpoint="attendance_for_date")
    def attendance_for_date(emp_id: str, work_date: str):
        return jsonify(container.attendance_service.get_attendance(emp_id, work_date))

    @app.route("/attendance/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        result = container.attendance_service.check_in(_json_body().get("empId"))
        return jsonify(
            {
                "message": f"Checked in at {result.check_in} (IST). You can check out later.",
                "checkIn": result.check_in,
            }
        )

    @app.route("/attendance/checkout", methods=["POST"], endpoint="checkout")
    def checkout():
        result = container.attendance_service.check_out(_json_body().get("empId"))
        return jsonify({"message": "Check-out successful", "checkOut": result.check_out})
