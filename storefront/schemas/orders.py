"""
storefront/schemas/orders.py
Checkout and order records
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.schemas.cart import CartLineOut
from storefront.schemas.catalog import CourseSummary
from storefront.schemas.common import Notice
from storefront.schemas.profile import ProfileOut


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    amount_paid: float
    payment_status: str
    payment_id: str
    purchased_at: datetime
    course: CourseSummary


class CheckoutSummaryOut(BaseModel):
    """What the checkout page shows before paying."""
    profile: Optional[ProfileOut] = None
    items: List[CartLineOut]
    total: float


class CheckoutResponse(BaseModel):
    success: bool = True
    checkout_token: str
    replayed: bool = False
    orders: List[OrderOut]
    total_paid: float
    notice: Notice


class DashboardOut(BaseModel):
    profile: Optional[ProfileOut] = None
    orders: List[OrderOut]
    course_count: int
