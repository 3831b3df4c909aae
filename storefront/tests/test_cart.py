"""
Cart API: uniqueness, totals, ownership.
"""
from sqlalchemy import func, select

from storefront.orm.cart_item import CartItem


class TestAddToCart:

    async def test_add_returns_notice_and_count(self, client, courses, register_user):
        _, headers = await register_user()

        response = await client.post("/api/cart", json={"course_id": courses[0].id}, headers=headers)
        assert response.status_code == 201
        data = response.json()
        assert data["notice"] == {"title": "Success", "message": "Course added to cart!", "severity": "success"}
        assert data["cart_count"] == 1

    async def test_duplicate_is_informational_conflict(self, client, courses, register_user, session_factory):
        user_id, headers = await register_user()
        body = {"course_id": courses[0].id}

        assert (await client.post("/api/cart", json=body, headers=headers)).status_code == 201
        response = await client.post("/api/cart", json=body, headers=headers)

        assert response.status_code == 409
        data = response.json()
        assert data["code"] == "ALREADY_IN_CART"
        assert data["error"] == "Already in Cart"
        assert data["message"] == "This course is already in your cart"
        assert data["details"]["severity"] == "info"

        async with session_factory() as session:
            result = await session.execute(
                select(func.count()).select_from(CartItem).where(CartItem.user_id == user_id)
            )
            assert result.scalar() == 1

    async def test_unknown_course_is_404(self, client, register_user):
        _, headers = await register_user()
        response = await client.post("/api/cart", json={"course_id": 9999}, headers=headers)
        assert response.status_code == 404
        assert response.json()["code"] == "COURSE_NOT_FOUND"

    async def test_unknown_fields_are_rejected(self, client, courses, register_user):
        _, headers = await register_user()
        response = await client.post(
            "/api/cart", json={"course_id": courses[0].id, "quantity": 2}, headers=headers
        )
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_same_course_in_two_carts(self, client, courses, register_user):
        _, alice = await register_user(email="alice@example.com")
        _, bob = await register_user(email="bob@example.com")
        body = {"course_id": courses[0].id}

        assert (await client.post("/api/cart", json=body, headers=alice)).status_code == 201
        assert (await client.post("/api/cart", json=body, headers=bob)).status_code == 201


class TestCartView:

    async def test_total_is_sum_of_discounted_prices(self, client, courses, register_user):
        _, headers = await register_user()
        for course in courses:
            await client.post("/api/cart", json={"course_id": course.id}, headers=headers)

        response = await client.get("/api/cart", headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["total"] == 300.0
        assert {line["course"]["title"] for line in data["items"]} == {"Java Basics", "Spring Boot Pro"}

        count = await client.get("/api/cart/count", headers=headers)
        assert count.json() == {"count": 2}

    async def test_empty_cart(self, client, register_user):
        _, headers = await register_user()
        response = await client.get("/api/cart", headers=headers)
        assert response.json() == {"items": [], "count": 0, "total": 0.0}

    async def test_cart_requires_login(self, client):
        response = await client.get("/api/cart")
        assert response.status_code == 401
        assert response.json()["code"] == "AUTH_REQUIRED"


class TestRemoveFromCart:

    async def test_remove_own_line(self, client, courses, register_user):
        _, headers = await register_user()
        added = await client.post("/api/cart", json={"course_id": courses[0].id}, headers=headers)
        assert added.status_code == 201

        cart = (await client.get("/api/cart", headers=headers)).json()
        item_id = cart["items"][0]["id"]

        response = await client.delete(f"/api/cart/{item_id}", headers=headers)
        assert response.status_code == 200
        assert response.json()["notice"]["message"] == "Item removed from cart"
        assert response.json()["cart_count"] == 0

    async def test_cannot_remove_someone_elses_line(self, client, courses, register_user):
        _, alice = await register_user(email="alice@example.com")
        _, bob = await register_user(email="bob@example.com")
        await client.post("/api/cart", json={"course_id": courses[0].id}, headers=alice)
        item_id = (await client.get("/api/cart", headers=alice)).json()["items"][0]["id"]

        response = await client.delete(f"/api/cart/{item_id}", headers=bob)
        assert response.status_code == 403
        assert response.json()["code"] == "OWNERSHIP_VIOLATION"

        assert (await client.get("/api/cart/count", headers=alice)).json()["count"] == 1

    async def test_missing_line_is_404(self, client, register_user):
        _, headers = await register_user()
        response = await client.delete("/api/cart/424242", headers=headers)
        assert response.status_code == 404
        assert response.json()["code"] == "CART_ITEM_NOT_FOUND"
