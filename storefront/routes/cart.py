"""
storefront/routes/cart.py
Cart management for the signed-in user
"""
import logging

from fastapi import APIRouter, Depends

from storefront.schemas.cart import (
    AddToCartRequest,
    CartCountOut,
    CartMutationResponse,
    CartOut,
)
from storefront.schemas.common import Notice
from storefront.security.session import SessionContext, get_session_context
from storefront.services import cart_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartOut)
async def get_cart(ctx: SessionContext = Depends(get_session_context)):
    items = await cart_service.list_cart(ctx.db, ctx.user_id)
    return CartOut(
        items=items,
        count=len(items),
        total=float(cart_service.cart_total(items)),
    )


@router.get("/count", response_model=CartCountOut)
async def get_cart_count(ctx: SessionContext = Depends(get_session_context)):
    return CartCountOut(count=await cart_service.count_cart(ctx.db, ctx.user_id))


@router.post("", response_model=CartMutationResponse, status_code=201)
async def add_to_cart(
    body: AddToCartRequest,
    ctx: SessionContext = Depends(get_session_context),
):
    """
    Add a course to the cart.
    A course that is already there answers 409 ALREADY_IN_CART (severity info).
    """
    await cart_service.add_to_cart(ctx.db, ctx.user_id, body.course_id)
    return CartMutationResponse(
        notice=Notice(title="Success", message="Course added to cart!"),
        cart_count=await cart_service.count_cart(ctx.db, ctx.user_id),
    )


@router.delete("/{item_id}", response_model=CartMutationResponse)
async def remove_from_cart(
    item_id: int,
    ctx: SessionContext = Depends(get_session_context),
):
    await cart_service.remove_line(ctx.db, ctx.user_id, item_id)
    return CartMutationResponse(
        notice=Notice(title="Success", message="Item removed from cart"),
        cart_count=await cart_service.count_cart(ctx.db, ctx.user_id),
    )
