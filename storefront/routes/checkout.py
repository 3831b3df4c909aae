"""
storefront/routes/checkout.py
Checkout summary and payment
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status

from storefront.schemas.common import Notice
from storefront.schemas.orders import CheckoutResponse, CheckoutSummaryOut
from storefront.security.session import SessionContext, get_session_context
from storefront.services import checkout_service

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.get("", response_model=CheckoutSummaryOut)
async def get_checkout_summary(ctx: SessionContext = Depends(get_session_context)):
    """Profile details, cart lines and total. 409 CART_EMPTY with redirect=/cart when empty."""
    summary = await checkout_service.checkout_summary(ctx.db, ctx.user_id)
    return CheckoutSummaryOut(
        profile=summary["profile"],
        items=summary["items"],
        total=float(summary["total"]),
    )


@router.post("", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    response: Response,
    ctx: SessionContext = Depends(get_session_context),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
):
    """
    Pay for everything in the cart.

    Send the same Idempotency-Key to retry safely: a replay returns the
    orders the first attempt created (200, replayed=true).
    """
    result = await checkout_service.checkout(ctx.db, ctx.user_id, checkout_token=idempotency_key)
    if result.replayed:
        response.status_code = status.HTTP_200_OK

    return CheckoutResponse(
        checkout_token=result.checkout_token,
        replayed=result.replayed,
        orders=result.orders,
        total_paid=float(result.total_paid),
        notice=Notice(
            title="Payment Successful!",
            message="Your enrollment is confirmed. Check your email for details.",
        ),
    )
