"""
storefront/routes/dashboard.py
Student dashboard and profile
"""
from fastapi import APIRouter, Depends

from storefront.schemas.orders import DashboardOut
from storefront.schemas.profile import ProfileOut, ProfileUpdate
from storefront.security.session import SessionContext, get_session_context
from storefront.services import checkout_service, profile_service

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardOut)
async def get_dashboard(ctx: SessionContext = Depends(get_session_context)):
    """Profile plus purchased courses, newest first."""
    orders = await checkout_service.list_user_orders(ctx.db, ctx.user_id)
    return DashboardOut(
        profile=await profile_service.find_profile(ctx.db, ctx.user_id),
        orders=orders,
        course_count=len(orders),
    )


@router.get("/profile", response_model=ProfileOut)
async def get_profile(ctx: SessionContext = Depends(get_session_context)):
    return await profile_service.get_profile(ctx.db, ctx.user_id)


@router.put("/profile", response_model=ProfileOut)
async def update_profile(
    changes: ProfileUpdate,
    ctx: SessionContext = Depends(get_session_context),
):
    return await profile_service.update_profile(ctx.db, ctx.user_id, changes)
