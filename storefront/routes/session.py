"""
storefront/routes/session.py
Navigation context for the signed-in user
"""
from fastapi import APIRouter, Depends

from storefront.schemas.auth import SessionOut
from storefront.security.session import SessionContext, get_session_context
from storefront.services import cart_service, profile_service, role_service

router = APIRouter(prefix="/session", tags=["Session"])


@router.get("", response_model=SessionOut)
async def get_session(ctx: SessionContext = Depends(get_session_context)):
    """Who is signed in, whether to show the admin link, and the cart badge."""
    profile = await profile_service.find_profile(ctx.db, ctx.user_id)
    return SessionOut(
        user_id=ctx.user_id,
        email=ctx.user.email,
        full_name=profile.full_name if profile else None,
        is_admin=await role_service.is_admin(ctx.db, ctx.user_id),
        cart_items_count=await cart_service.count_cart(ctx.db, ctx.user_id),
    )
