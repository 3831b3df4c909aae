"""
storefront/services/checkout_service.py
Cart-to-order checkout.

All order inserts and the removal of the purchased cart lines run in
one transaction: either every line becomes an order and leaves the
cart, or nothing changes. Each attempt carries a checkout token;
replaying a token returns the orders it already produced instead of
charging again.
"""
import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.exceptions import CartChangedError, CheckoutFailedError, EmptyCartError
from storefront.orm.cart_item import CartItem
from storefront.orm.order import Order, PaymentStatus
from storefront.services import cart_service, profile_service
from storefront.services.payment_simulator import PaymentSimulator, new_payment_id

logger = logging.getLogger(__name__)

MAX_TOKEN_LENGTH = 64


@dataclass
class CheckoutResult:
    checkout_token: str
    orders: List[Order] = field(default_factory=list)
    replayed: bool = False

    @property
    def total_paid(self) -> Decimal:
        return sum((Decimal(o.amount_paid) for o in self.orders), Decimal("0"))


def normalize_token(raw: Optional[str]) -> str:
    """Client-supplied Idempotency-Key, or a fresh server token."""
    token = (raw or "").strip()
    if not token:
        return uuid.uuid4().hex
    return token[:MAX_TOKEN_LENGTH]


async def checkout_summary(db: AsyncSession, user_id: int) -> dict:
    items = await cart_service.list_cart(db, user_id)
    if not items:
        raise EmptyCartError()

    return {
        "profile": await profile_service.find_profile(db, user_id),
        "items": items,
        "total": cart_service.cart_total(items),
    }


async def find_orders_for_token(db: AsyncSession, user_id: int, token: str) -> List[Order]:
    result = await db.execute(
        select(Order)
        .where(Order.user_id == user_id, Order.checkout_token == token)
        .order_by(Order.id)
    )
    return list(result.scalars().unique().all())


async def _create_order(db: AsyncSession, user_id: int, item: CartItem, token: str) -> Order:
    """Insert one order row for a cart line. Flushes, never commits."""
    order = Order(
        user_id=user_id,
        course_id=item.course_id,
        course=item.course,
        amount_paid=item.course.discounted_price,
        payment_status=PaymentStatus.completed.value,
        payment_id=new_payment_id(),
        checkout_token=token,
    )
    db.add(order)
    await db.flush()
    return order


async def checkout(
    db: AsyncSession,
    user_id: int,
    checkout_token: Optional[str] = None,
    simulator: Optional[PaymentSimulator] = None,
) -> CheckoutResult:
    """
    Turn the user's cart into orders.

    Raises:
        EmptyCartError: nothing to buy (and no earlier attempt with this token)
        CartChangedError: a concurrent checkout already bought these lines
        CheckoutFailedError: the transaction was rolled back
    """
    token = normalize_token(checkout_token)

    existing = await find_orders_for_token(db, user_id, token)
    if existing:
        logger.info(f"Checkout replay for user {user_id}, token {token}")
        return CheckoutResult(checkout_token=token, orders=existing, replayed=True)

    items = await cart_service.list_cart(db, user_id)
    if not items:
        raise EmptyCartError()

    simulator = simulator or PaymentSimulator()
    await simulator.charge(user_id, cart_service.cart_total(items))

    item_ids = [item.id for item in items]
    orders = []
    try:
        for item in items:
            orders.append(await _create_order(db, user_id, item, token))
        removed = await cart_service.remove_purchased_lines(db, user_id, item_ids)
        if removed != len(item_ids):
            raise CartChangedError()
        await db.commit()
    except CartChangedError:
        await db.rollback()
        logger.warning(
            f"Checkout for user {user_id} lost its cart lines to a concurrent checkout, token {token}"
        )
        raise
    except IntegrityError:
        await db.rollback()
        # Lost a race against a concurrent attempt with the same token
        existing = await find_orders_for_token(db, user_id, token)
        if existing:
            logger.info(f"Concurrent checkout replay for user {user_id}, token {token}")
            return CheckoutResult(checkout_token=token, orders=existing, replayed=True)
        logger.error(f"Checkout constraint violation for user {user_id}, token {token}")
        raise CheckoutFailedError()
    except Exception as e:
        await db.rollback()
        logger.error(f"Checkout failed for user {user_id}: {type(e).__name__}: {str(e)}")
        raise CheckoutFailedError()

    logger.info(
        f"Checkout complete for user {user_id}: {len(orders)} orders, "
        f"{removed} cart lines cleared, token {token}"
    )
    return CheckoutResult(checkout_token=token, orders=orders)


async def list_user_orders(db: AsyncSession, user_id: int) -> List[Order]:
    """The student's purchases, newest first."""
    result = await db.execute(
        select(Order)
        .where(Order.user_id == user_id)
        .order_by(Order.purchased_at.desc(), Order.id.desc())
    )
    return list(result.scalars().unique().all())
