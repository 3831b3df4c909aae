"""
storefront/services/catalog_service.py
Course catalogue reads. No filtering or pagination.
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.errors import ErrorCode
from storefront.exceptions import NotFoundError
from storefront.orm.course import Course

logger = logging.getLogger(__name__)


async def list_courses(db: AsyncSession) -> List[Course]:
    result = await db.execute(select(Course).order_by(Course.id))
    return list(result.scalars().all())


async def get_course(db: AsyncSession, course_id: int) -> Course:
    result = await db.execute(select(Course).where(Course.id == course_id))
    course = result.scalar_one_or_none()
    if not course:
        raise NotFoundError("Course", course_id, code=ErrorCode.COURSE_NOT_FOUND)
    return course
