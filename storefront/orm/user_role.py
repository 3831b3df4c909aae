"""
storefront/orm/user_role.py
Role membership table consulted by the admin gate.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.orm.base import TimestampedModel

ADMIN_ROLE = "admin"


class UserRole(TimestampedModel):
    """
    (user, role) pair. Written only by the operations CLI.
    """
    __tablename__ = "user_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    role = Column(String(50), nullable=False, index=True)

    user = relationship("User", back_populates="roles")

    def __repr__(self):
        return f"<UserRole(user_id={self.user_id}, role='{self.role}')>"
