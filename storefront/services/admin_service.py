"""
storefront/services/admin_service.py
Back-office aggregation, listings and refunds.
"""
import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.errors import ErrorCode
from storefront.exceptions import InvalidOrderStateError, NotFoundError
from storefront.orm.course import Course
from storefront.orm.order import Order, PaymentStatus
from storefront.orm.profile import Profile
from storefront.schemas.admin import AdminOrderRow, AdminStatsOut

logger = logging.getLogger(__name__)


async def compute_stats(db: AsyncSession) -> AdminStatsOut:
    """
    Headline figures.

    total_revenue and total_sales count every order, refunded ones
    included. refunded_amount and net_revenue are reported alongside.
    """
    result = await db.execute(
        select(func.coalesce(func.sum(Order.amount_paid), 0), func.count(Order.id))
    )
    total_revenue, total_sales = result.one()

    result = await db.execute(
        select(func.coalesce(func.sum(Order.amount_paid), 0)).where(
            Order.payment_status == PaymentStatus.refunded.value
        )
    )
    refunded_amount = result.scalar()

    result = await db.execute(select(func.count()).select_from(Profile))
    total_students = result.scalar() or 0

    total_revenue = Decimal(str(total_revenue))
    refunded_amount = Decimal(str(refunded_amount))

    return AdminStatsOut(
        total_revenue=float(total_revenue),
        total_sales=total_sales or 0,
        total_students=total_students,
        refunded_amount=float(refunded_amount),
        net_revenue=float(total_revenue - refunded_amount),
    )


async def list_order_rows(db: AsyncSession) -> List[AdminOrderRow]:
    """Every order with its course title and the buyer's profile, newest first."""
    result = await db.execute(
        select(Order, Course.title, Profile)
        .join(Course, Course.id == Order.course_id)
        .outerjoin(Profile, Profile.id == Order.user_id)
        .order_by(Order.purchased_at.desc(), Order.id.desc())
    )

    rows = []
    for order, course_title, profile in result.unique().all():
        rows.append(AdminOrderRow(
            id=order.id,
            student_name=profile.full_name if profile else None,
            student_email=profile.email if profile else None,
            student_mobile=profile.mobile if profile else None,
            college_name=profile.college_name if profile else None,
            course_title=course_title,
            amount_paid=float(order.amount_paid),
            payment_status=order.payment_status,
            payment_id=order.payment_id,
            purchased_at=order.purchased_at,
        ))
    return rows


async def list_students(db: AsyncSession) -> List[Profile]:
    result = await db.execute(
        select(Profile).order_by(Profile.created_at.desc(), Profile.id.desc())
    )
    return list(result.scalars().all())


async def refund_order(db: AsyncSession, order_id: int, admin_id: int) -> Order:
    """
    Flip a completed order to refunded. Commits the session.

    Only completed orders can be refunded; anything else is an invalid
    state transition.
    """
    result = await db.execute(select(Order).where(Order.id == order_id))
    order = result.unique().scalar_one_or_none()
    if not order:
        raise NotFoundError("Order", order_id, code=ErrorCode.ORDER_NOT_FOUND)

    if order.payment_status != PaymentStatus.completed.value:
        raise InvalidOrderStateError(order_id, order.payment_status, PaymentStatus.completed.value)

    order.payment_status = PaymentStatus.refunded.value
    await db.commit()
    logger.info(f"Order {order_id} refunded by admin {admin_id}")
    return order
