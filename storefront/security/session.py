"""
storefront/security/session.py
Per-request session context and the admin role gate.

The context is built once per request from the bearer token and handed
to services explicitly; nothing keeps a module-level "current user".
"""
import logging
from dataclasses import dataclass

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.errors import ErrorCode, ForbiddenError
from storefront.orm.user import User
from storefront.security.rbac import get_current_user
from storefront.services import role_service

logger = logging.getLogger(__name__)

ADMIN_DENIED_MESSAGE = "You don't have permission to access this page."


@dataclass
class SessionContext:
    user: User
    db: AsyncSession
    # Plain copy of user.id, still readable after the session rolls back
    user_id: int


async def get_session_context(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> SessionContext:
    return SessionContext(user=user, db=db, user_id=user.id)


async def require_admin(
    ctx: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """
    Admit only users holding the admin role.

    The role table is consulted on every request. A failed lookup is
    treated the same as a missing role.
    """
    user_id = ctx.user_id
    try:
        allowed = await role_service.is_admin(ctx.db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Role lookup failed for user {user_id}: {type(e).__name__}: {e}")
        await ctx.db.rollback()
        allowed = False

    if not allowed:
        logger.warning(f"Admin access denied for user {user_id}")
        raise ForbiddenError(
            ADMIN_DENIED_MESSAGE,
            code=ErrorCode.ADMIN_REQUIRED,
            details={"redirect": "/"},
        )
    return ctx
