"""
Signup, login, refresh and logout.
"""
from sqlalchemy import select

from storefront.orm.profile import Profile
from storefront.security.rbac import (
    create_refresh_token,
    decode_token,
    hash_password,
    normalize_password,
    verify_password,
)


class TestRegister:

    async def test_register_creates_user_and_profile(self, client, session_factory):
        response = await client.post("/api/auth/register", json={
            "email": "Asha@Example.com",
            "password": "secret123",
            "full_name": "Asha Rao",
            "mobile": "98765",
            "college_name": "IIT",
            "year": "3rd",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"] and data["refresh_token"]

        async with session_factory() as session:
            profile = (await session.execute(
                select(Profile).where(Profile.id == data["user_id"])
            )).scalar_one()
        assert profile.full_name == "Asha Rao"
        assert profile.email == "asha@example.com"
        assert profile.college_name == "IIT"

    async def test_duplicate_email(self, client, register_user):
        await register_user(email="dup@example.com")
        response = await client.post("/api/auth/register", json={
            "email": "dup@example.com", "password": "secret123", "full_name": "Someone Else",
        })
        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_TAKEN"

    async def test_short_password_rejected(self, client):
        response = await client.post("/api/auth/register", json={
            "email": "x@example.com", "password": "123", "full_name": "X",
        })
        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["errors"][0]["loc"] == ["body", "password"]


class TestLogin:

    async def test_login_and_me(self, client, register_user):
        await register_user(email="me@example.com")

        response = await client.post("/api/auth/login", json={"email": "me@example.com", "password": "secret123"})
        assert response.status_code == 200
        token = response.json()["access_token"]

        me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "me@example.com"
        assert me.json()["is_active"] is True

    async def test_form_login(self, client, register_user):
        await register_user(email="form@example.com")
        response = await client.post(
            "/api/auth/login/form",
            data={"username": "form@example.com", "password": "secret123"},
        )
        assert response.status_code == 200
        assert "access_token" in response.json()

    async def test_wrong_password(self, client, register_user):
        await register_user(email="me@example.com")
        response = await client.post("/api/auth/login", json={"email": "me@example.com", "password": "nope-nope"})
        assert response.status_code == 401
        data = response.json()
        assert data["success"] is False
        assert data["code"] == "AUTH_INVALID"

    async def test_garbage_token(self, client):
        response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["code"] == "AUTH_INVALID"


class TestRefreshAndLogout:

    async def test_refresh_issues_new_tokens(self, client):
        registered = await client.post("/api/auth/register", json={
            "email": "r@example.com", "password": "secret123", "full_name": "R",
        })
        refresh_token = registered.json()["refresh_token"]

        response = await client.post("/api/auth/refresh", json={"refresh_token": refresh_token})
        assert response.status_code == 200
        assert response.json()["user_id"] == registered.json()["user_id"]

        # the old refresh token was rotated out
        stale = await client.post("/api/auth/refresh", json={"refresh_token": refresh_token})
        assert stale.status_code == 401

    async def test_access_token_cannot_refresh(self, client):
        registered = await client.post("/api/auth/register", json={
            "email": "r@example.com", "password": "secret123", "full_name": "R",
        })
        response = await client.post(
            "/api/auth/refresh", json={"refresh_token": registered.json()["access_token"]}
        )
        assert response.status_code == 401

    async def test_logout_revokes_refresh_token(self, client):
        registered = (await client.post("/api/auth/register", json={
            "email": "out@example.com", "password": "secret123", "full_name": "Out",
        })).json()
        headers = {"Authorization": f"Bearer {registered['access_token']}"}

        response = await client.post("/api/auth/logout", headers=headers)
        assert response.status_code == 200
        assert response.json()["success"] is True

        again = await client.post("/api/auth/refresh", json={"refresh_token": registered["refresh_token"]})
        assert again.status_code == 401
        assert again.json()["code"] == "AUTH_EXPIRED"


class TestPasswordUtils:

    def test_hash_and_verify(self):
        hashed = hash_password("secret123")
        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_long_passwords_truncate_to_72_bytes(self):
        assert len(normalize_password("é" * 100).encode("utf-8")) <= 72

    def test_refresh_token_needs_refresh_key(self):
        token = create_refresh_token(1)
        assert decode_token(token) is None
        assert decode_token(token, is_refresh=True)["sub"] == "1"
