"""
storefront/database.py
Database configuration: async engine, session factory and lifecycle hooks
"""
import logging
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.config.settings import DATABASE_URL
from storefront.orm.base import Base
import storefront.orm  # noqa: F401  ensures all models are registered

logger = logging.getLogger(__name__)

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set")


def build_engine(url: str):
    """
    Create an async engine with pool settings suited to the backend.

    In-memory SQLite must share one connection, otherwise every
    checkout would see an empty database.
    """
    if ":memory:" in url:
        return create_async_engine(
            url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    if "sqlite" in url.lower():
        return create_async_engine(
            url,
            echo=False,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
            pool_timeout=30,
            connect_args={
                "timeout": 30.0,   # SQLite busy timeout in seconds
            }
        )
    # PostgreSQL/MySQL
    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        pool_size=20,
        max_overflow=30,
        pool_timeout=30,
        pool_recycle=3600,
    )


engine = build_engine(DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db():
    """Dependency for getting async database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Create missing tables. Idempotent."""
    logger.info("Initializing database...")
    try:
        logger.info(f"Database dialect: {engine.url.get_backend_name()}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✓ Database initialization complete")
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise


async def close_db():
    """Close database connection"""
    await engine.dispose()
    logger.info("Database connection closed")


async def seed_catalogue_if_empty(db: AsyncSession) -> int:
    """
    Seed the demo course catalogue if the courses table is empty.
    Called during startup after DB initialization.
    """
    from storefront.orm.course import Course
    from storefront.seed.seed_courses import seed_courses

    result = await db.execute(select(func.count()).select_from(Course))
    count = result.scalar() or 0
    if count:
        logger.info("✓ Courses already exist (%d courses) - skipping seed", count)
        return 0

    logger.info("No courses found - seeding demo catalogue")
    return await seed_courses(db)
