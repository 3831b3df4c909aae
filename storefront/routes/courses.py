"""
storefront/routes/courses.py
Public course catalogue
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.catalog import CourseOut
from storefront.services import catalog_service

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=List[CourseOut])
async def list_courses(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_courses(db)


@router.get("/{course_id}", response_model=CourseOut)
async def get_course(course_id: int, db: AsyncSession = Depends(get_db)):
    return await catalog_service.get_course(db, course_id)
