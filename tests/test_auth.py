"""Tests for API authentication."""
import pytest


SIGNUP = {
    "email": "new.owner@shopflow.io",
    "password": "hunter22",
    "name": "New Owner",
    "shop_name": "Corner Shop",
}


class TestSignUp:
    """Tests for account registration."""

    def test_signup_returns_token_and_user(self, client):
        response = client.post("/api/v1/auth/signup", json=SIGNUP)

        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["email"] == SIGNUP["email"]
        assert data["user"]["shop_name"] == "Corner Shop"
        assert "password" not in data["user"]

    def test_signup_seeds_starter_catalog(self, client):
        """New accounts start with the default categories and sample products."""
        token = client.post("/api/v1/auth/signup", json=SIGNUP).json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}

        categories = client.get("/api/v1/categories", headers=headers).json()
        products = client.get("/api/v1/products", headers=headers).json()

        assert len(categories) == 5
        assert products["total"] == 5

    def test_duplicate_email_rejected(self, client):
        client.post("/api/v1/auth/signup", json=SIGNUP)

        response = client.post("/api/v1/auth/signup", json=SIGNUP)

        assert response.status_code == 409
        assert response.json()["error"] == "User with this email already exists"

    def test_short_password_rejected(self, client):
        response = client.post("/api/v1/auth/signup", json={**SIGNUP, "password": "abc"})

        assert response.status_code == 422
        assert response.json()["error"] == "Validation failed"


class TestLogin:
    """Tests for login and token use."""

    def test_valid_credentials_accepted(self, client, owner):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "owner@shopflow.io", "password": "secret123"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == str(owner.id)

    @pytest.mark.parametrize("email,password", [
        ("owner@shopflow.io", "wrong-password"),
        ("owner@shopflow.io", "SECRET123"),
        ("nobody@shopflow.io", "secret123"),
    ])
    def test_invalid_credentials_rejected(self, client, owner, email, password):
        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"

    def test_me_returns_current_user(self, client, auth_headers):
        response = client.get("/api/v1/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "owner@shopflow.io"

    def test_logout(self, client, auth_headers):
        response = client.post("/api/v1/auth/logout", headers=auth_headers)

        assert response.status_code == 200


class TestProtectedEndpoints:
    """Tests that inventory endpoints require a bearer token."""

    def test_missing_token_rejected(self, client):
        endpoints = [
            "/api/v1/products",
            "/api/v1/categories",
            "/api/v1/dashboard/stats",
            "/api/v1/analytics",
        ]

        for endpoint in endpoints:
            response = client.get(endpoint)
            assert response.status_code == 401, f"Endpoint {endpoint} should require auth"

    def test_malformed_token_rejected(self, client):
        response = client.get(
            "/api/v1/products",
            headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401

    def test_health_is_public(self, client):
        assert client.get("/health").status_code == 200
        assert client.get("/api/v1/dashboard/health").status_code == 200
