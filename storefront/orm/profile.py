"""
storefront/orm/profile.py
Student profile - one row per user, keyed by the user id.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from storefront.orm.base import Base


class Profile(Base):
    """
    Personal data shown on the dashboard, the checkout summary
    and the admin student list.

    Created together with the user at signup.
    """
    __tablename__ = "profiles"

    id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )

    full_name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    mobile = Column(String(20), nullable=True)
    college_name = Column(String(255), nullable=True)
    year = Column(String(20), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<Profile(id={self.id}, full_name='{self.full_name}')>"
