from fastapi.testclient import TestClient

from hostel_leave.main import create_app

from conftest import ASHA, make_settings


class TestSignup:
    def test_signup_returns_token_and_profile(self, client):
        response = client.post("/api/signup", json=ASHA)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Signed up and logged in"
        assert body["token"]
        assert body["student"] == {
            "id": body["student"]["id"],
            "name": "Asha",
            "email": "asha@x.com",
            "hostel": "H1",
            "year": "2",
        }
        assert "password" not in body["student"]

    def test_duplicate_email_is_rejected(self, client, signed_up):
        response = client.post("/api/signup", json=ASHA)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Email already exists"
        assert body["error_code"] == "DUPLICATE_ENTRY"

    def test_email_is_unique_regardless_of_case(self, client, signed_up):
        response = client.post("/api/signup", json={**ASHA, "email": "ASHA@X.COM"})
        assert response.status_code == 400

    def test_missing_fields_are_listed(self, client):
        payload = {k: v for k, v in ASHA.items() if k not in ("hostel", "year")}

        response = client.post("/api/signup", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Missing required fields: hostel, year"
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["path"] == "/api/signup"
        assert body["timestamp"]

    def test_blank_field_counts_as_missing(self, client):
        response = client.post("/api/signup", json={**ASHA, "name": "   "})
        assert response.status_code == 400
        assert response.json()["message"] == "Missing required fields: name"


class TestLogin:
    def test_login_returns_stored_profile_without_token(self, client, signed_up):
        response = client.post("/login", json={"email": "asha@x.com", "password": "p1"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["student"] == signed_up["student"]
        assert "token" not in body

    def test_wrong_password_and_unknown_email_look_the_same(self, client, signed_up):
        wrong_password = client.post("/login", json={"email": "asha@x.com", "password": "nope"})
        unknown_email = client.post("/login", json={"email": "ghost@x.com", "password": "p1"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json()["message"] == unknown_email.json()["message"] == "Invalid email or password"

    def test_missing_password(self, client):
        response = client.post("/login", json={"email": "asha@x.com"})
        assert response.status_code == 400
        assert response.json()["message"] == "Missing required fields: password"

    def test_login_token_can_be_enabled(self, tmp_path):
        app = create_app(make_settings(tmp_path, LOGIN_ISSUES_TOKEN=True))
        with TestClient(app) as client:
            client.post("/api/signup", json=ASHA)
            response = client.post("/login", json={"email": "asha@x.com", "password": "p1"})

            assert response.status_code == 200
            token = response.json()["token"]
            me = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})
            assert me.json()["email"] == "asha@x.com"


class TestProfile:
    def test_me_with_signup_token(self, client, signed_up):
        response = client.get("/api/me", headers={"Authorization": f"Bearer {signed_up['token']}"})

        assert response.status_code == 200
        assert response.json() == signed_up["student"]

    def test_me_without_token(self, client):
        response = client.get("/api/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Missing token"

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert response.json()["message"] == "Invalid token"

    def test_me_with_expired_token(self, client, expired_token):
        response = client.get("/api/me", headers={"Authorization": f"Bearer {expired_token}"})
        assert response.status_code == 403
        assert response.json()["error_code"] == "TOKEN_EXPIRED"

    def test_me_for_vanished_student(self, client, app):
        token = app.state.context.token_manager.create_token({"id": 999, "email": "gone@x.com"})
        response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 404


def test_health_and_tracing_headers(client):
    response = client.get("/health", headers={"X-Request-ID": "trace-123"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"] == "trace-123"
    assert float(response.headers["X-Process-Time"]) >= 0


class TestPasswordWhitespace:
    def test_password_is_used_exactly_as_submitted(self, client):
        client.post("/api/signup", json={**ASHA, "password": "pw "})

        trimmed = client.post("/login", json={"email": "asha@x.com", "password": "pw"})
        exact = client.post("/login", json={"email": "asha@x.com", "password": "pw "})

        assert trimmed.status_code == 401
        assert exact.status_code == 200

    def test_all_space_password_is_a_real_password(self, client):
        response = client.post("/api/signup", json={**ASHA, "password": "   "})
        assert response.status_code == 200

        login = client.post("/login", json={"email": "asha@x.com", "password": "   "})
        assert login.status_code == 200


class TestFrameworkErrors:
    def test_missing_pdf_uses_error_envelope(self, client):
        response = client.get("/pdfs/leave_999.pdf")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "RESOURCE_NOT_FOUND"
        assert body["path"] == "/pdfs/leave_999.pdf"
        assert body["timestamp"]

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert response.json()["message"] == "Not Found"

    def test_wrong_method_keeps_allow_header(self, client):
        response = client.get("/api/signup")

        assert response.status_code == 405
        assert response.json()["success"] is False
        assert "POST" in response.headers["allow"]
