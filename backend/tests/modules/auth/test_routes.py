"""
Tests for the session endpoints and the auth dependencies.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_user_service
from shared.models import UserRole


@pytest.fixture
def user_service(user_directory):
    """The directory doubles as the user service for the login upsert."""
    user_directory.upsert_profile = AsyncMock()
    return user_directory


@pytest.fixture
def client(auth_service, user_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestLogin:
    def test_login_sets_cookie(self, client, user_service):
        response = client.post(
            "/api/v1/jwt",
            json={"email": "a@example.com", "name": "Alice", "email_verified": True},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["email"] == "a@example.com"

        set_cookie = response.headers["set-cookie"].lower()
        assert set_cookie.startswith("token=")
        assert "httponly" in set_cookie
        assert "max-age=86400" in set_cookie

    def test_login_upserts_profile(self, client, user_service):
        client.post(
            "/api/v1/jwt",
            json={"email": "a@example.com", "name": "Alice", "image": "https://img/a.png"},
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

        user_service.upsert_profile.assert_awaited_once()
        args, kwargs = user_service.upsert_profile.call_args
        assert args[0] == "a@example.com"
        assert args[1].name == "Alice"
        assert args[1].image == "https://img/a.png"
        assert kwargs["origin"] == "203.0.113.7"

    def test_login_invalid_email(self, client, user_service):
        response = client.post("/api/v1/jwt", json={"email": "nope"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        user_service.upsert_profile.assert_not_awaited()

    def test_cookie_authenticates_follow_up_requests(self, client, user_service, make_user_record):
        user_service.get_profile = AsyncMock(return_value=make_user_record("a@example.com"))
        client.post("/api/v1/jwt", json={"email": "a@example.com"})

        response = client.get("/api/v1/users/me")

        assert response.status_code == 200
        assert response.json()["email"] == "a@example.com"


class TestLogout:
    def test_logout_clears_cookie(self, client, make_token):
        client.cookies.set("token", make_token())

        response = client.post("/api/v1/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True, "revoked": False}
        set_cookie = response.headers["set-cookie"].lower()
        assert set_cookie.startswith("token=")
        assert "max-age=0" in set_cookie

    def test_logout_without_token(self, client):
        response = client.post("/api/v1/logout")
        assert response.status_code == 200
        assert response.json()["revoked"] is False


class TestAuthDependencies:
    def test_missing_token(self, client, user_service):
        """Request without credentials should return 401 before the store is touched."""
        user_service.get_profile = AsyncMock()

        response = client.get("/api/v1/users/me")

        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_TOKEN"
        assert response.headers["www-authenticate"] == "Bearer"
        user_service.get_profile.assert_not_awaited()

    def test_bearer_header(self, client, user_service, make_token, make_user_record):
        user_service.get_profile = AsyncMock(return_value=make_user_record("a@example.com"))

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token('a@example.com')}"},
        )

        assert response.status_code == 200
        user_service.get_profile.assert_awaited_once_with("a@example.com")

    def test_cookie_wins_over_header(self, client, user_service, make_token, make_user_record):
        user_service.get_profile = AsyncMock(return_value=make_user_record("a@example.com"))
        client.cookies.set("token", make_token("a@example.com"))

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token('b@example.com')}"},
        )

        assert response.status_code == 200
        user_service.get_profile.assert_awaited_once_with("a@example.com")

    def test_bad_cookie_falls_back_to_header(self, client, user_service, make_token, make_user_record):
        user_service.get_profile = AsyncMock(return_value=make_user_record("b@example.com"))
        client.cookies.set("token", "garbage")

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token('b@example.com')}"},
        )

        assert response.status_code == 200
        user_service.get_profile.assert_awaited_once_with("b@example.com")

    def test_expired_cookie_falls_back_to_header(self, client, user_service, make_token, make_user_record):
        user_service.get_profile = AsyncMock(return_value=make_user_record("b@example.com"))
        client.cookies.set("token", make_token("a@example.com", expired=True))

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token('b@example.com')}"},
        )

        assert response.status_code == 200
        user_service.get_profile.assert_awaited_once_with("b@example.com")

    def test_bad_cookie_and_bad_header(self, client, make_token):
        client.cookies.set("token", "garbage")

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token(expired=True)}"},
        )

        assert response.status_code == 401
        assert "expired" in response.json()["message"].lower()

    def test_expired_token(self, client, make_token):
        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token(expired=True)}"},
        )
        assert response.status_code == 401
        assert "expired" in response.json()["message"].lower()

    def test_missing_jwt_secret(self, client, auth_service, make_token):
        """Missing signing secret should return 401."""
        auth_service._settings = auth_service._settings.model_copy(update={"jwt_secret": ""})

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {make_token()}"},
        )

        assert response.status_code == 401
        assert "not configured" in response.json()["message"].lower()

    def test_admin_gate_member_forbidden(self, client, user_service, make_token, make_user_record):
        user_service.get_user_by_email.return_value = make_user_record("a@example.com", UserRole.MEMBER)
        user_service.list_users = AsyncMock()

        response = client.get(
            "/api/v1/users",
            headers={"Authorization": f"Bearer {make_token('a@example.com')}"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "INSUFFICIENT_PERMISSIONS"
        user_service.list_users.assert_not_awaited()

    def test_admin_gate_unregistered(self, client, user_service, make_token):
        user_service.list_users = AsyncMock()

        response = client.get(
            "/api/v1/users",
            headers={"Authorization": f"Bearer {make_token('ghost@example.com')}"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "USER_NOT_REGISTERED"
        user_service.list_users.assert_not_awaited()

    def test_admin_gate_admin_allowed(self, client, user_service, make_token, make_user_record):
        admin_record = make_user_record("admin@example.com", UserRole.ADMIN)
        user_service.get_user_by_email.return_value = admin_record
        user_service.list_users = AsyncMock(return_value=[admin_record])

        response = client.get(
            "/api/v1/users",
            headers={"Authorization": f"Bearer {make_token('admin@example.com')}"},
        )

        assert response.status_code == 200
        assert response.json()[0]["role"] == "admin"
