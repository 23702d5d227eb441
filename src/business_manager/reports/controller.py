from __future__ import annotations

from flask import Flask, jsonify, request, send_from_directory

from ..container import Container
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import report_descriptor_to_json
from .forms import parse_report_request


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/generate", methods=["POST"], endpoint="generate_report")
    @permission_required(Permission.VIEW_REPORTS)
    def generate_report():
        report_request = parse_report_request(request.get_json(silent=True))
        descriptor = container.report_service.generate(report_request)
        return jsonify(report_descriptor_to_json(descriptor))

    @app.route("/api/reports/download/<path:filename>", methods=["GET"], endpoint="download_report")
    @permission_required(Permission.VIEW_REPORTS)
    def download_report(filename: str):
        return send_from_directory(container.report_service.output_folder.resolve(), filename, as_attachment=True)
