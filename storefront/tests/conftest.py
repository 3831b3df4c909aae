"""
Shared fixtures: a throwaway SQLite file per test, an httpx client
wired to it through dependency overrides, and a few data helpers.
"""
import os

# Configure before any storefront import reads the environment
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["JWT_REFRESH_SECRET_KEY"] = "test-refresh-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["PAYMENT_SIMULATION_DELAY_SECONDS"] = "0"
os.environ["CONTACT_SIMULATION_DELAY_SECONDS"] = "0"
os.environ["FEATURE_SEED_ON_STARTUP"] = "false"

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from storefront.database import get_db
from storefront.main import app
from storefront.orm.base import Base
from storefront.orm.course import Course
from storefront.services import role_service


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Create test database engine."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/test.db",
        poolclass=NullPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Test client; every request gets its own session on the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def courses(db):
    """Two courses priced 100 and 200."""
    rows = [
        Course(
            title="Java Basics",
            description="Intro course",
            mode="Self Paced",
            original_price=150,
            discounted_price=100,
            features=["Recorded lessons"],
            modules=[{"title": "Getting Started", "topics": ["JDK setup"]}],
            limited_seats=False,
        ),
        Course(
            title="Spring Boot Pro",
            description="Advanced course",
            mode="Live Online",
            original_price=300,
            discounted_price=200,
            features=["Live classes", "Projects"],
            modules=[{"title": "Spring Core", "topics": ["DI", "Beans"]}],
            seats_remaining=20,
            limited_seats=True,
            batch_start_date="1st of every month",
        ),
    ]
    db.add_all(rows)
    await db.commit()
    return rows


@pytest.fixture
def register_user(client):
    """
    Register through the API and return (user_id, auth headers).
    """
    async def _register(email="student@example.com", full_name="Test Student", password="secret123", **extra):
        payload = {"email": email, "password": password, "full_name": full_name, **extra}
        response = await client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user_id"], {"Authorization": f"Bearer {data['access_token']}"}

    return _register


@pytest.fixture
def make_admin(session_factory):
    async def _grant(user_id: int):
        async with session_factory() as session:
            await role_service.grant_role(session, user_id)

    return _grant
