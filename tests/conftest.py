from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from hostel_leave.config.settings import Settings
from hostel_leave.core.context import AppContext
from hostel_leave.db.init_db import init_db
from hostel_leave.main import create_app
from hostel_leave.repositories.student_repository import StudentRepository

ADMIN_SECRET = "warden-secret"

ASHA = {
    "name": "Asha",
    "email": "asha@x.com",
    "password": "p1",
    "hostel": "H1",
    "year": 2,
}


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}",
        "PUBLIC_DIR": str(tmp_path / "public"),
        "PASSWORD_BCRYPT_ROUNDS": 4,
        "ADMIN_SECRET": ADMIN_SECRET,
        "JWT_SECRET": "test-signing-secret",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "WARNING",
        "LOG_DIR": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def context(settings):
    ctx = AppContext.from_settings(settings)
    init_db(ctx.engine)
    yield ctx
    ctx.dispose()


@pytest.fixture
def db(context):
    session = context.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def student(db, context):
    return StudentRepository(db).create_student(
        name="Asha",
        email="asha@x.com",
        password_hash=context.password_manager.hash_password("p1"),
        hostel="H1",
        year="2",
    )


@pytest.fixture
def admin_headers():
    return {"x-admin-secret": ADMIN_SECRET}


@pytest.fixture
def signed_up(client):
    """Signup response body for Asha."""
    response = client.post("/api/signup", json=ASHA)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def applied_leave(client, signed_up):
    """Id of a pending leave applied for by Asha."""
    response = client.post("/apply-leave", json={
        "student_id": signed_up["student"]["id"],
        "from_date": "2025-01-01",
        "to_date": "2025-01-03",
        "reason": "Home",
    })
    assert response.status_code == 200, response.text
    return response.json()["leave_id"]


@pytest.fixture
def expired_token(app):
    return app.state.context.token_manager.create_token(
        {"id": 1, "email": "asha@x.com"},
        expires_delta=timedelta(seconds=-10),
    )
