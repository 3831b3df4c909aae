"""
storefront/services/profile_service.py
Student profile reads and owner updates.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.errors import ErrorCode
from storefront.exceptions import NotFoundError
from storefront.orm.profile import Profile
from storefront.orm.user import User
from storefront.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


def build_profile(
    user: User,
    full_name: str,
    mobile: Optional[str] = None,
    college_name: Optional[str] = None,
    year: Optional[str] = None,
) -> Profile:
    """
    Profile row for a new signup. The caller adds it to the session
    alongside the user so both land in one commit.
    """
    return Profile(
        user=user,
        full_name=full_name,
        email=user.email,
        mobile=mobile,
        college_name=college_name,
        year=year,
    )


async def find_profile(db: AsyncSession, user_id: int) -> Optional[Profile]:
    result = await db.execute(select(Profile).where(Profile.id == user_id))
    return result.scalar_one_or_none()


async def get_profile(db: AsyncSession, user_id: int) -> Profile:
    profile = await find_profile(db, user_id)
    if not profile:
        raise NotFoundError("Profile", user_id, code=ErrorCode.PROFILE_NOT_FOUND)
    return profile


async def update_profile(db: AsyncSession, user_id: int, changes: ProfileUpdate) -> Profile:
    """Apply the fields the client actually sent. Commits the session."""
    profile = await get_profile(db, user_id)

    for field, value in changes.model_dump(exclude_unset=True).items():
        if field == "full_name" and value is None:
            continue
        setattr(profile, field, value)

    await db.commit()
    await db.refresh(profile)
    logger.info(f"Profile updated for user {user_id}")
    return profile
