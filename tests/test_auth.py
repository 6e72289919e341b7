from datetime import timedelta

from suggestion_box.application.services.auth_service import (
    create_access_token,
    create_user,
    get_or_create_user,
)
from suggestion_box.domain.models.user import User, ROLE_ADMIN


def test_login_with_local_account(client, db):
    create_user(db, name="Root", email="Root@Example.com", password="s3cret-pass", role=ROLE_ADMIN)

    response = client.post("/api/auth/login", json={"email": "root@example.com", "password": "s3cret-pass"})
    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["role"] == "admin"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "root@example.com"


def test_login_rejects_bad_password(client, db):
    create_user(db, name="Root", email="root@example.com", password="s3cret-pass")

    response = client.post("/api/auth/login", json={"email": "root@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid email or password"


def test_sso_users_cannot_password_login(client, member):
    response = client.post("/api/auth/login", json={"email": member.email, "password": ""})
    assert response.status_code == 401


def test_expired_token_is_rejected(client, member):
    token = create_access_token({"sub": member.email}, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_without_subject_is_rejected(client):
    token = create_access_token({"name": "Nobody"})
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_get_or_create_user_is_case_insensitive(db, member):
    same = get_or_create_user(db, "  ANA@example.com ")
    assert same.id == member.id
    assert db.query(User).count() == 1

    created = get_or_create_user(db, "Carla@Example.com", "Carla")
    assert created.email == "carla@example.com"
    assert created.role == "user"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
