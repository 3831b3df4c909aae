"""
storefront/services/cart_service.py
Cart lines scoped to one user.

There is no quantity: a line is the intent to buy one course, and the
(user_id, course_id) constraint keeps it unique.
"""
import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.errors import ErrorCode, validate_ownership
from storefront.exceptions import AlreadyInCartError, NotFoundError
from storefront.orm.cart_item import CartItem
from storefront.services import catalog_service

logger = logging.getLogger(__name__)


async def list_cart(db: AsyncSession, user_id: int) -> List[CartItem]:
    result = await db.execute(
        select(CartItem)
        .where(CartItem.user_id == user_id)
        .order_by(CartItem.created_at, CartItem.id)
    )
    return list(result.scalars().unique().all())


def cart_total(items: List[CartItem]) -> Decimal:
    """Sum of the current discounted price of every line."""
    return sum((Decimal(item.course.discounted_price) for item in items), Decimal("0"))


async def count_cart(db: AsyncSession, user_id: int) -> int:
    result = await db.execute(
        select(func.count()).select_from(CartItem).where(CartItem.user_id == user_id)
    )
    return result.scalar() or 0


async def add_to_cart(db: AsyncSession, user_id: int, course_id: int) -> CartItem:
    """
    Insert a cart line. Commits the session.

    Raises AlreadyInCartError when the uniqueness constraint rejects
    the insert.
    """
    # SQLite does not enforce the foreign key, so check the course first
    await catalog_service.get_course(db, course_id)

    item = CartItem(user_id=user_id, course_id=course_id)
    db.add(item)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info(f"Course {course_id} already in cart for user {user_id}")
        raise AlreadyInCartError(course_id)

    logger.info(f"User {user_id} added course {course_id} to cart")
    return item


async def remove_line(db: AsyncSession, user_id: int, item_id: int) -> None:
    """Delete one of the caller's own cart lines. Commits the session."""
    result = await db.execute(select(CartItem).where(CartItem.id == item_id))
    item = result.scalar_one_or_none()
    if not item:
        raise NotFoundError("Cart item", item_id, code=ErrorCode.CART_ITEM_NOT_FOUND)

    validate_ownership(user_id, item.user_id, "cart item")

    await db.delete(item)
    await db.commit()
    logger.info(f"User {user_id} removed cart item {item_id}")


async def remove_purchased_lines(db: AsyncSession, user_id: int, item_ids: List[int]) -> int:
    """
    Delete exactly the given lines of the user's cart and return how
    many rows went. Does NOT commit; checkout runs this inside its own
    transaction.

    Lines added after the cart was read are left alone. A count short of
    len(item_ids) means another checkout already took some of them.
    """
    if not item_ids:
        return 0
    result = await db.execute(
        delete(CartItem).where(CartItem.user_id == user_id, CartItem.id.in_(item_ids))
    )
    return result.rowcount or 0
