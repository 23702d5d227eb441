from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import stats_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @permission_required(Permission.VIEW_DASHBOARD)
    def dashboard_stats():
        return jsonify(stats_to_json(container.dashboard_service.snapshot()))
