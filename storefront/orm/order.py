"""
storefront/orm/order.py
Purchase record created at checkout.

Orders are never deleted. The only mutation is the admin refund,
which flips payment_status from completed to refunded.
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.orm.base import Base


class PaymentStatus(str, Enum):
    completed = "completed"
    refunded = "refunded"


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        # One order per course per checkout attempt of one user; replays cannot duplicate
        UniqueConstraint("user_id", "checkout_token", "course_id", name="uq_orders_user_checkout_course"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    course_id = Column(
        Integer,
        ForeignKey("courses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    amount_paid = Column(Numeric(10, 2), nullable=False)
    payment_status = Column(String(20), nullable=False, default=PaymentStatus.completed.value, index=True)
    payment_id = Column(String(100), nullable=False)
    checkout_token = Column(String(64), nullable=False, index=True)

    purchased_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    course = relationship("Course", back_populates="orders", lazy="joined")

    def __repr__(self):
        return f"<Order(id={self.id}, user_id={self.user_id}, course_id={self.course_id}, status='{self.payment_status}')>"
