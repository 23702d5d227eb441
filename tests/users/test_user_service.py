from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from business_manager.core.enums import ActivityType, Role
from business_manager.core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from business_manager.users.forms import parse_new_manual_user, parse_profile_update
from business_manager.users.model import ExternalIdentity, NewManualUser, ProfileUpdate


def test_create_manual_user_hashes_password(container, repos):
    user = container.user_service.create_manual_user(NewManualUser(username="sara", password="secret1"))

    assert user.role is Role.VIEWER
    assert user.is_manual_user
    assert user.password_hash != "secret1"
    assert check_password_hash(user.password_hash, "secret1")
    logged = repos.activities.of_type(ActivityType.USER_CREATED)
    assert logged[0].description == "تم إنشاء حساب مستخدم جديد: sara"


def test_duplicate_username_conflicts(container, repos):
    first = container.user_service.create_manual_user(
        NewManualUser(username="sara", password="secret1", role=Role.EDITOR)
    )

    with pytest.raises(ConflictError):
        container.user_service.create_manual_user(NewManualUser(username="sara", password="other99"))

    assert len(repos.users.users) == 1
    assert repos.users.get_by_id(first.user_id) == first
    assert len(repos.activities.of_type(ActivityType.USER_CREATED)) == 1


def test_duplicate_email_conflicts(container):
    container.user_service.create_manual_user(NewManualUser(username="one", password="secret1", email="a@x.io"))
    with pytest.raises(ConflictError):
        container.user_service.create_manual_user(NewManualUser(username="two", password="secret1", email="a@x.io"))


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "ab", "password": "secret1"},
        {"username": "abc", "password": "12345"},
        {"username": "abc"},
        {"username": "abc", "password": "secret1", "role": "owner"},
    ],
)
def test_parse_new_manual_user_rejects(payload):
    with pytest.raises(ValidationError):
        parse_new_manual_user(payload)


def test_parse_new_manual_user_defaults_to_viewer():
    data = parse_new_manual_user({"username": "abc", "password": "secret1"})
    assert data.role is Role.VIEWER


def test_authenticate(container):
    container.user_service.create_manual_user(NewManualUser(username="sara", password="secret1", role=Role.ADMIN))

    s_user = container.auth_service.authenticate("sara", "secret1")
    assert s_user.role is Role.ADMIN

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("sara", "wrong-pass")
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("nobody", "secret1")


def test_external_users_cannot_log_in_or_set_password(container):
    user = container.user_service.upsert_external_user(ExternalIdentity(external_id="ext-1", email="e@x.io"))

    assert not user.is_manual_user
    assert user.password_hash is None
    with pytest.raises(ValidationError):
        container.user_service.update_profile(user.user_id, ProfileUpdate(password="secret1"))


def test_upsert_external_user_refreshes_existing(container, repos):
    created = container.user_service.upsert_external_user(ExternalIdentity(external_id="ext-1", first_name="A"))
    updated = container.user_service.upsert_external_user(ExternalIdentity(external_id="ext-1", first_name="B"))

    assert updated.user_id == created.user_id
    assert updated.first_name == "B"
    assert len(repos.users.users) == 1


def test_update_profile(container):
    user = container.user_service.create_manual_user(NewManualUser(username="sara", password="secret1"))
    container.user_service.create_manual_user(NewManualUser(username="taken", password="secret1"))

    updated = container.user_service.update_profile(
        user.user_id, ProfileUpdate(first_name="Sara", password="newpass1")
    )
    assert updated.first_name == "Sara"
    assert updated.username == "sara"
    assert check_password_hash(updated.password_hash, "newpass1")

    with pytest.raises(ConflictError):
        container.user_service.update_profile(user.user_id, ProfileUpdate(username="taken"))
    with pytest.raises(NotFoundError):
        container.user_service.update_profile(999, ProfileUpdate(first_name="x"))


def test_parse_profile_update_treats_blank_as_unchanged():
    changes = parse_profile_update({"username": "", "password": "", "firstName": "A"})
    assert changes.username is None
    assert changes.password is None
    assert changes.first_name == "A"


def test_external_identity_signs_in_through_the_session(client, container):
    user = container.user_service.upsert_external_user(
        ExternalIdentity(external_id="ext-7", email="ext@x.io", first_name="Huda")
    )
    with client.session_transaction() as sess:
        sess["user_id"] = user.user_id
        sess["role"] = user.role.value

    response = client.get("/api/auth/user")

    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == user.user_id
    assert body["role"] == Role.VIEWER.value
    assert body["isManualUser"] is False
    assert client.post("/api/customers", json={}).status_code == 403
