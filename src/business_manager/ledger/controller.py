from __future__ import annotations

from dataclasses import replace

from flask import Flask, current_app, jsonify, request

from ..container import Container
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import expense_to_json, income_to_json
from ..web.uploads import discard_upload, save_upload
from .forms import parse_date_range, parse_new_expense, parse_new_income


def register(app: Flask, container: Container) -> None:
    @app.route("/api/income", methods=["GET"], endpoint="list_income")
    @permission_required(Permission.VIEW_LEDGER)
    def list_income():
        window = parse_date_range(request.args)
        return jsonify([income_to_json(e) for e in container.ledger_service.list_income(window)])

    @app.route("/api/income", methods=["POST"], endpoint="create_income")
    @permission_required(Permission.MANAGE_LEDGER)
    def create_income():
        if request.mimetype == "multipart/form-data":
            payload = request.form
            receipt = request.files.get("receipt")
        else:
            payload = request.get_json(silent=True)
            receipt = None

        data = parse_new_income(payload)

        stored = None
        if receipt is not None and receipt.filename:
            stored = save_upload(
                receipt,
                current_app.config["UPLOAD_FOLDER"],
                max_bytes=current_app.config["MAX_UPLOAD_BYTES"],
            )
            data = replace(data, receipt_url=stored.url)

        try:
            entry = container.ledger_service.record_income(data)
        except Exception:
            if stored is not None:
                discard_upload(stored)
            raise
        return jsonify(income_to_json(entry)), 201

    @app.route("/api/income/prints", methods=["GET"], endpoint="list_print_income")
    @permission_required(Permission.VIEW_LEDGER)
    def list_print_income():
        window = parse_date_range(request.args)
        return jsonify([income_to_json(e) for e in container.ledger_service.list_print_income(window)])

    @app.route("/api/expenses", methods=["GET"], endpoint="list_expenses")
    @permission_required(Permission.VIEW_LEDGER)
    def list_expenses():
        window = parse_date_range(request.args)
        return jsonify([expense_to_json(e) for e in container.ledger_service.list_expenses(window)])

    @app.route("/api/expenses", methods=["POST"], endpoint="create_expense")
    @permission_required(Permission.MANAGE_LEDGER)
    def create_expense():
        data = parse_new_expense(request.get_json(silent=True))
        entry = container.ledger_service.record_expense(data)
        return jsonify(expense_to_json(entry)), 201
