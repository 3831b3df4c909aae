from .base import Base

# Core models
from .user import User
from .profile import Profile
from .user_role import UserRole, ADMIN_ROLE
from .course import Course
from .cart_item import CartItem
from .order import Order, PaymentStatus

__all__ = [
    "Base",
    "User",
    "Profile",
    "UserRole",
    "ADMIN_ROLE",
    "Course",
    "CartItem",
    "Order",
    "PaymentStatus",
]
