"""API tests for registration, login and account routes."""

import pytest

from tests.harness import (
    ApiEnv,
    bearer,
    create_api_fixture,
    promote_to_admin,
    register_and_login,
)

api = create_api_fixture()


class TestRegistration:
    """Tests for POST /register."""

    @pytest.mark.asyncio
    async def test_register(self, api: ApiEnv):
        # Act
        response = await api.client.post(
            "/register", json={"email": "alice@example.com", "password": "s3cret"}
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["id"]

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, api: ApiEnv):
        body = {"email": "alice@example.com", "password": "s3cret"}
        await api.client.post("/register", json=body)

        response = await api.client.post("/register", json=body)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, api: ApiEnv):
        response = await api.client.post(
            "/register", json={"email": "nope", "password": "s3cret"}
        )

        assert response.status_code == 400
        assert "Invalid email address" in response.json()["detail"]


class TestLoginFlow:
    """Tests for /auth/login, /auth/me and /auth/logout."""

    @pytest.mark.asyncio
    async def test_login_sets_cookie_and_returns_token(self, api: ApiEnv):
        await api.client.post(
            "/register", json={"email": "alice@example.com", "password": "s3cret"}
        )

        response = await api.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "s3cret"}
        )

        assert response.status_code == 200
        assert response.json()["token"]
        set_cookie = response.headers["set-cookie"]
        assert "auth_token=" in set_cookie
        assert "HttpOnly" in set_cookie

    @pytest.mark.asyncio
    async def test_login_cookie_authenticates_me(self, api: ApiEnv):
        """The cookie set at login is enough for /auth/me."""
        await api.client.post(
            "/register", json={"email": "alice@example.com", "password": "s3cret"}
        )
        await api.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "s3cret"}
        )

        response = await api.client.get("/auth/me")

        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["email"] == "alice@example.com"
        assert "password_hash" not in data["user"]

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, api: ApiEnv):
        await api.client.post(
            "/register", json={"email": "alice@example.com", "password": "s3cret"}
        )

        response = await api.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "guess"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_me_without_token(self, api: ApiEnv):
        response = await api.client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    @pytest.mark.asyncio
    async def test_me_with_bearer_token(self, api: ApiEnv):
        token = await register_and_login(api.client, "alice@example.com")

        response = await api.client.get("/auth/me", headers=bearer(token))

        assert response.json()["authenticated"] is True
        assert response.json()["user"]["role"] == "user"

    @pytest.mark.asyncio
    async def test_me_with_garbage_token(self, api: ApiEnv):
        response = await api.client.get("/auth/me", headers=bearer("garbage"))

        assert response.status_code == 200
        assert response.json()["authenticated"] is False

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, api: ApiEnv):
        response = await api.client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Successfully logged out",
        }
        assert "auth_token" in response.headers["set-cookie"]


class TestAccountRoutes:
    """Tests for password change, user listing and promotion."""

    @pytest.mark.asyncio
    async def test_change_password(self, api: ApiEnv):
        token = await register_and_login(api.client, "alice@example.com")

        response = await api.client.post(
            "/users/me/password",
            json={"current_password": "s3cret", "new_password": "n3w-s3cret"},
            headers=bearer(token),
        )

        assert response.status_code == 204
        login = await api.client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "n3w-s3cret"}
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_change_password_requires_auth(self, api: ApiEnv):
        response = await api.client.post(
            "/users/me/password",
            json={"current_password": "s3cret", "new_password": "n3w-s3cret"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_users_forbidden_for_regular_user(self, api: ApiEnv):
        token = await register_and_login(api.client, "alice@example.com")

        response = await api.client.get("/users", headers=bearer(token))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_lists_and_promotes_users(self, api: ApiEnv):
        # Arrange
        admin_token = await register_and_login(api.client, "admin@example.com")
        await promote_to_admin(api.container, "admin@example.com")
        bob = await api.client.post(
            "/register", json={"email": "bob@example.com", "password": "s3cret"}
        )
        bob_id = bob.json()["id"]

        # Act
        listing = await api.client.get("/users", headers=bearer(admin_token))
        promoted = await api.client.post(
            f"/users/{bob_id}/promote", headers=bearer(admin_token)
        )

        # Assert
        assert listing.status_code == 200
        assert [u["email"] for u in listing.json()["users"]] == [
            "admin@example.com",
            "bob@example.com",
        ]
        assert promoted.status_code == 200
        assert promoted.json()["role"] == "admin"

    @pytest.mark.asyncio
    async def test_promote_unknown_user(self, api: ApiEnv):
        admin_token = await register_and_login(api.client, "admin@example.com")
        await promote_to_admin(api.container, "admin@example.com")

        response = await api.client.post(
            "/users/550e8400-e29b-41d4-a716-446655440000/promote",
            headers=bearer(admin_token),
        )

        assert response.status_code == 404
