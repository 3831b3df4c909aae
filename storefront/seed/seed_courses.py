"""
storefront/seed/seed_courses.py
Seed the JavaMaster course catalogue (idempotent by title)
"""
import asyncio
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.orm.course import Course
from storefront.schemas.catalog import CourseSeed

logger = logging.getLogger(__name__)


COURSES = [
    {
        "title": "Java Full Stack Mastery",
        "description": "From core Java to Spring Boot microservices, with live coaching and real projects.",
        "mode": "Live Online",
        "original_price": 19999,
        "discounted_price": 14999,
        "features": [
            "Live interactive classes",
            "1:1 doubt sessions",
            "Industry-grade projects",
            "Interview preparation",
            "Certificate of completion",
            "Lifetime access to recordings",
        ],
        "modules": [
            {
                "title": "Core Java",
                "topics": ["Syntax and data types", "OOP principles", "Exception handling", "Collections framework"],
            },
            {
                "title": "Advanced Java",
                "topics": ["Multithreading", "Streams and lambdas", "JDBC", "Design patterns"],
            },
            {
                "title": "Spring Boot",
                "topics": ["Dependency injection", "REST APIs", "Spring Data JPA", "Spring Security"],
            },
            {
                "title": "Microservices and Deployment",
                "topics": ["Service discovery", "API gateway", "Docker", "CI/CD basics"],
            },
        ],
        "seats_remaining": 20,
        "limited_seats": True,
        "batch_start_date": "1st of every month",
    },
    {
        "title": "Core Java Foundations",
        "description": "A self-paced introduction to Java for beginners.",
        "mode": "Self Paced",
        "original_price": 4999,
        "discounted_price": 2999,
        "features": [
            "Recorded lessons",
            "Practice exercises",
            "Community support",
        ],
        "modules": [
            {
                "title": "Getting Started",
                "topics": ["JDK setup", "First program", "Variables and operators"],
            },
            {
                "title": "Object-Oriented Java",
                "topics": ["Classes and objects", "Inheritance", "Interfaces"],
            },
        ],
        "seats_remaining": None,
        "limited_seats": False,
        "batch_start_date": None,
    },
]


def validated_catalogue(entries: List[dict] = None) -> List[CourseSeed]:
    """Validate seed entries. Unknown or missing fields raise ValidationError."""
    return [CourseSeed.model_validate(entry) for entry in (entries if entries is not None else COURSES)]


async def seed_courses(db: AsyncSession, entries: List[dict] = None) -> int:
    """
    Insert catalogue entries whose title is not present yet.
    Returns the number of courses created. Commits the session.
    """
    created_count = 0
    existing_count = 0

    try:
        for seed in validated_catalogue(entries):
            result = await db.execute(select(Course.id).where(Course.title == seed.title))
            if result.scalar_one_or_none() is not None:
                logger.info(f"✓ Course '{seed.title}' exists")
                existing_count += 1
                continue

            db.add(Course(**seed.model_dump(mode="json")))
            logger.info(f"✓ Course '{seed.title}' created")
            created_count += 1

        await db.commit()
    except Exception as e:
        logger.error(f"❌ Error seeding courses: {str(e)}")
        await db.rollback()
        raise

    logger.info(f"RESULT: {created_count} created, {existing_count} already exist")
    return created_count


async def main():
    """Main entry point"""
    from storefront.database import AsyncSessionLocal, init_db

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_courses(session)
    logger.info("✅ Course seeding complete")


if __name__ == "__main__":
    asyncio.run(main())
