from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..container import Container
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import customer_to_json
from .forms import parse_days, parse_new_customer


def register(app: Flask, container: Container) -> None:
    @app.route("/api/customers", methods=["GET"], endpoint="list_customers")
    @permission_required(Permission.VIEW_CUSTOMERS)
    def list_customers():
        today = today_local()
        customers = container.customer_service.list_customers()
        return jsonify([customer_to_json(c, today) for c in customers])

    @app.route("/api/customers", methods=["POST"], endpoint="create_customer")
    @permission_required(Permission.MANAGE_CUSTOMERS)
    def create_customer():
        data = parse_new_customer(request.get_json(silent=True))
        customer = container.customer_service.create_customer(data)
        return jsonify(customer_to_json(customer, today_local())), 201

    @app.route("/api/customers/<int:customer_id>/renew", methods=["PATCH"], endpoint="renew_customer")
    @permission_required(Permission.MANAGE_CUSTOMERS)
    def renew_customer(customer_id: int):
        customer = container.customer_service.renew_subscription(customer_id)
        return jsonify(customer_to_json(customer, today_local()))

    @app.route("/api/customers/expiring/<days>", methods=["GET"], endpoint="expiring_customers")
    @permission_required(Permission.VIEW_CUSTOMERS)
    def expiring_customers(days: str):
        today = today_local()
        customers = container.customer_service.list_expiring(parse_days(days), today=today)
        return jsonify([customer_to_json(c, today) for c in customers])
