"""
API contract checks: error envelope, health endpoints, auth boundaries.

PRINCIPLE: APIs are contracts. Contracts must never break.
"""
import pytest

from storefront.errors import ErrorCode, get_error_summary

PROTECTED = [
    ("GET", "/api/auth/me"),
    ("POST", "/api/auth/logout"),
    ("GET", "/api/session"),
    ("GET", "/api/cart"),
    ("GET", "/api/cart/count"),
    ("DELETE", "/api/cart/1"),
    ("GET", "/api/checkout"),
    ("POST", "/api/checkout"),
    ("GET", "/api/dashboard"),
    ("GET", "/api/profile"),
    ("GET", "/api/admin/stats"),
]


class TestErrorResponseFormat:
    """Verify all error responses follow the standard format"""

    @pytest.mark.parametrize("method,path", PROTECTED)
    async def test_401_envelope(self, client, method, path):
        response = await client.request(method, path)
        assert response.status_code == 401
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Unauthorized"
        assert data["code"] == ErrorCode.AUTH_REQUIRED
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_unknown_route_envelope(self, client):
        response = await client.get("/api/nope")
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["code"] == ErrorCode.NOT_FOUND

    async def test_validation_envelope(self, client):
        response = await client.post("/api/auth/register", json={"email": "not-an-email", "password": "123"})
        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Validation Error"
        assert data["code"] == ErrorCode.VALIDATION_ERROR
        assert isinstance(data["message"], str)
        assert len(data["details"]["errors"]) >= 2


class TestHealthEndpoints:

    async def test_main_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "FEATURE_ADMIN_EXPORT" in data["features"]

    async def test_errors_health(self, client):
        response = await client.get("/api/errors/health")
        assert response.status_code == 200
        data = response.json()
        assert data == get_error_summary()
        assert "ADMIN_REQUIRED" in data["error_codes"]
        assert data["status_codes"]["409"] == "Conflict"

    async def test_root(self, client):
        response = await client.get("/")
        assert response.json()["message"] == "JavaMaster Storefront API"


class TestPublicEndpoints:

    async def test_catalogue_needs_no_token(self, client):
        assert (await client.get("/api/courses")).status_code == 200

    async def test_contact_needs_no_token(self, client):
        response = await client.post("/api/contact", json={
            "name": "A", "email": "a@example.com", "subject": "Hi", "message": "Hello there, team!",
        })
        assert response.status_code == 200
