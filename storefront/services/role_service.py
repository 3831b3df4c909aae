"""
storefront/services/role_service.py
Role membership reads and writes.

The HTTP API only ever reads roles. Grants and revocations come from
the operations CLI.
"""
import logging
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.orm.user_role import UserRole, ADMIN_ROLE

logger = logging.getLogger(__name__)


async def has_role(db: AsyncSession, user_id: int, role: str) -> bool:
    result = await db.execute(
        select(UserRole.id).where(
            UserRole.user_id == user_id,
            UserRole.role == role,
        )
    )
    return result.scalar_one_or_none() is not None


async def is_admin(db: AsyncSession, user_id: int) -> bool:
    """Single-row lookup of (user_id, 'admin'). Never cached."""
    return await has_role(db, user_id, ADMIN_ROLE)


async def list_roles(db: AsyncSession, user_id: int) -> List[str]:
    result = await db.execute(
        select(UserRole.role).where(UserRole.user_id == user_id).order_by(UserRole.role)
    )
    return list(result.scalars().all())


async def grant_role(db: AsyncSession, user_id: int, role: str = ADMIN_ROLE) -> bool:
    """
    Grant a role. Returns False if the user already held it.
    Commits the session.
    """
    if await has_role(db, user_id, role):
        return False

    db.add(UserRole(user_id=user_id, role=role))
    await db.commit()
    logger.info(f"Granted role '{role}' to user {user_id}")
    return True


async def revoke_role(db: AsyncSession, user_id: int, role: str = ADMIN_ROLE) -> bool:
    """Revoke a role. Returns False if there was nothing to revoke."""
    result = await db.execute(
        delete(UserRole).where(
            UserRole.user_id == user_id,
            UserRole.role == role,
        )
    )
    await db.commit()
    removed = (result.rowcount or 0) > 0
    if removed:
        logger.info(f"Revoked role '{role}' from user {user_id}")
    return removed
