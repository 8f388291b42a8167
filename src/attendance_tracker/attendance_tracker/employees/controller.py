from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/employee/<emp_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(emp_id: str):
        return jsonify(container.employee_service.find_by_id(emp_id).to_dict())

    @app.route("/employee/<emp_id>/today", methods=["GET"], endpoint="employee_today")
    def employee_today(emp_id: str):
        """Employee plus today's check-in/check-out state."""
        return jsonify(container.attendance_service.get_today(emp_id).to_dict())

    @app.route("/employee", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        employee = container.employee_service.add(data.get("id"), data.get("name"))
        return jsonify({"message": "Employee added successfully", "employee": employee.to_dict()})
