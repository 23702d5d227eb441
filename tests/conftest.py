from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from business_manager.core.enums import Role
from business_manager.main import create_app

from fakes import FakeRepos


@pytest.fixture
def today() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def repos() -> FakeRepos:
    return FakeRepos()


@pytest.fixture
def container(repos, tmp_path):
    return repos.container(tmp_path / "reports")


@pytest.fixture
def app(container, tmp_path):
    app = create_app("business_manager.config.testing", container=container)
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_user(repos):
    def _add(username: str, password: str = "secret123", role: Role = Role.VIEWER) -> int:
        return repos.users.create(
            username=username,
            email=None,
            first_name=None,
            last_name=None,
            profile_image_url=None,
            external_id=None,
            password_hash=generate_password_hash(password),
            role=role,
            is_manual_user=True,
        )

    return _add


@pytest.fixture
def login_as(client, add_user):
    """Put a user of `role` into the session without going through /api/login."""

    def _login(role: Role) -> int:
        user_id = add_user(f"{role.value}-user", role=role)
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role.value
        return user_id

    return _login
