"""
storefront/orm/course.py
Course catalogue entry. Read-only for the API; written by the seed.
"""
from sqlalchemy import Column, String, Text, Integer, Boolean, Numeric, JSON
from sqlalchemy.orm import relationship

from storefront.orm.base import TimestampedModel


class Course(TimestampedModel):
    """
    A purchasable course.

    Fields:
    - mode: delivery mode shown as a badge (e.g. "Live Online")
    - original_price / discounted_price: rupees; checkout charges discounted_price
    - features: list of selling points
    - modules: list of {"title": str, "topics": [str]}
    - seats_remaining / limited_seats: scarcity banner
    - batch_start_date: free text, displayed as-is
    """
    __tablename__ = "courses"

    title = Column(String(200), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    mode = Column(String(50), nullable=False, default="Live Online")

    original_price = Column(Numeric(10, 2), nullable=False)
    discounted_price = Column(Numeric(10, 2), nullable=False)

    features = Column(JSON, nullable=False, default=list)
    modules = Column(JSON, nullable=False, default=list)

    seats_remaining = Column(Integer, nullable=True)
    limited_seats = Column(Boolean, nullable=False, default=False)
    batch_start_date = Column(String(50), nullable=True)

    cart_items = relationship("CartItem", back_populates="course")
    orders = relationship("Order", back_populates="course")

    def __repr__(self):
        return f"<Course(id={self.id}, title='{self.title}')>"
