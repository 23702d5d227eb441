from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int
from ..container import Container
from ..core.constants import DEFAULT_ACTIVITY_LIMIT
from ..core.permissions import Permission
from ..web.guards import permission_required
from ..web.serializers import activity_to_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activities", methods=["GET"], endpoint="list_activities")
    @permission_required(Permission.VIEW_ACTIVITIES)
    def list_activities():
        limit = optional_int(request.args.get("limit"), "limit")
        activities = container.activity_log.recent(DEFAULT_ACTIVITY_LIMIT if limit is None else limit)
        return jsonify([activity_to_json(a) for a in activities])
