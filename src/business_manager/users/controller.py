from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..core.exceptions import NotFoundError, UnauthorizedError
from ..core.permissions import Permission, permissions_for
from ..web.guards import current_user_id, login_required, permission_required
from ..web.serializers import user_to_json
from .forms import parse_login, parse_new_manual_user, parse_profile_update


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        username, password = parse_login(request.get_json(silent=True))
        s_user = container.auth_service.authenticate(username, password)

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["role"] = s_user.role.value

        app.logger.info("user %s logged in", s_user.user_id)
        user = container.user_service.get_user(s_user.user_id)
        return jsonify(user_to_json(user, permissions=permissions_for(user.role)))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        session.clear()
        return "", 204

    @app.route("/api/auth/user", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        try:
            user = container.user_service.get_user(current_user_id())
        except NotFoundError:
            session.clear()
            raise UnauthorizedError("غير مصرح")
        return jsonify(user_to_json(user, permissions=permissions_for(user.role)))

    @app.route("/api/auth/user/profile", methods=["PUT"], endpoint="update_profile")
    @login_required
    def update_profile():
        changes = parse_profile_update(request.get_json(silent=True))
        user = container.user_service.update_profile(current_user_id(), changes)
        return jsonify(user_to_json(user, permissions=permissions_for(user.role)))

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @permission_required(Permission.MANAGE_USERS)
    def list_users():
        return jsonify([user_to_json(u) for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @permission_required(Permission.MANAGE_USERS)
    def create_user():
        data = parse_new_manual_user(request.get_json(silent=True))
        user = container.user_service.create_manual_user(data)
        return jsonify(user_to_json(user)), 201
