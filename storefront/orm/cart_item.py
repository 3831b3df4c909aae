"""
storefront/orm/cart_item.py
Cart line: intent to buy one course. One per (user, course).
"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.orm.base import TimestampedModel


class CartItem(TimestampedModel):
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_cart_items_user_course"),
    )

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    course_id = Column(
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    course = relationship("Course", back_populates="cart_items", lazy="joined")

    def __repr__(self):
        return f"<CartItem(id={self.id}, user_id={self.user_id}, course_id={self.course_id})>"
