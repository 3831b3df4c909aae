"""
Student dashboard, profile and navigation context.
"""


async def test_dashboard_lists_purchases_newest_first(client, courses, register_user):
    _, headers = await register_user(full_name="Asha Rao")

    await client.post("/api/cart", json={"course_id": courses[0].id}, headers=headers)
    await client.post("/api/checkout", headers=headers)
    await client.post("/api/cart", json={"course_id": courses[1].id}, headers=headers)
    await client.post("/api/checkout", headers=headers)

    response = await client.get("/api/dashboard", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["full_name"] == "Asha Rao"
    assert data["course_count"] == 2
    assert [o["course"]["title"] for o in data["orders"]] == ["Spring Boot Pro", "Java Basics"]


async def test_dashboard_only_shows_own_orders(client, courses, register_user):
    _, alice = await register_user(email="alice@example.com")
    _, bob = await register_user(email="bob@example.com")
    await client.post("/api/cart", json={"course_id": courses[0].id}, headers=alice)
    await client.post("/api/checkout", headers=alice)

    data = (await client.get("/api/dashboard", headers=bob)).json()
    assert data["orders"] == []
    assert data["course_count"] == 0


async def test_profile_update(client, register_user):
    _, headers = await register_user(full_name="Asha")

    response = await client.put(
        "/api/profile", json={"full_name": "Asha Rao", "college_name": "IIT Delhi"}, headers=headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["full_name"] == "Asha Rao"
    assert data["college_name"] == "IIT Delhi"

    assert (await client.get("/api/profile", headers=headers)).json()["college_name"] == "IIT Delhi"


async def test_profile_email_is_not_editable(client, register_user):
    _, headers = await register_user()
    response = await client.put("/api/profile", json={"email": "new@example.com"}, headers=headers)
    assert response.status_code == 422


async def test_session_context(client, courses, register_user):
    user_id, headers = await register_user(email="nav@example.com", full_name="Nav User")
    await client.post("/api/cart", json={"course_id": courses[0].id}, headers=headers)

    data = (await client.get("/api/session", headers=headers)).json()
    assert data == {
        "user_id": user_id,
        "email": "nav@example.com",
        "full_name": "Nav User",
        "is_admin": False,
        "cart_items_count": 1,
    }


async def test_dashboard_requires_login(client):
    assert (await client.get("/api/dashboard")).status_code == 401
