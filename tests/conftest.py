import os

# Settings are read once at import time, so the environment must be set first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BREVO_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from suggestion_box.main import app
from suggestion_box.infrastructure.database import Base, SessionLocal, engine
from suggestion_box.application.services.auth_service import create_access_token
from suggestion_box.domain.models.category import Category
from suggestion_box.domain.models.user import User, ROLE_ADMIN, ROLE_USER


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def _make_user(db, email, name, role):
    user = User(email=email, name=name, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user):
    token = create_access_token({"sub": user.email, "name": user.name})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def member(db):
    return _make_user(db, "ana@example.com", "Ana", ROLE_USER)


@pytest.fixture
def other_member(db):
    return _make_user(db, "bruno@example.com", "Bruno", ROLE_USER)


@pytest.fixture
def admin(db):
    return _make_user(db, "admin@example.com", "Admin", ROLE_ADMIN)


@pytest.fixture
def member_headers(member):
    return auth_headers(member)


@pytest.fixture
def other_headers(other_member):
    return auth_headers(other_member)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def category(db):
    category = Category(name="Bug Report", color="#EF4444", description="Issues and bugs")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def make_suggestion(client, category):
    def _make(headers, title="Fix login", content="The login page times out.", is_anonymous=False, category_id=None):
        response = client.post(
            "/api/suggestions",
            json={
                "title": title,
                "content": content,
                "category": category_id or category.id,
                "isAnonymous": is_anonymous,
            },
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["suggestion"]

    return _make
