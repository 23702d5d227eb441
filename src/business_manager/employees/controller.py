from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import employee_to_json
from .forms import parse_new_employee


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @permission_required(Permission.VIEW_EMPLOYEES)
    def list_employees():
        return jsonify([employee_to_json(e) for e in container.employee_service.list_active()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @permission_required(Permission.MANAGE_EMPLOYEES)
    def create_employee():
        data = parse_new_employee(request.get_json(silent=True))
        employee = container.employee_service.create_employee(data)
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="remove_employee")
    @permission_required(Permission.MANAGE_EMPLOYEES)
    def remove_employee(employee_id: int):
        container.employee_service.remove_employee(employee_id)
        return "", 204
