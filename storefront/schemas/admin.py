"""
storefront/schemas/admin.py
Back-office records
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from storefront.schemas.common import Notice


class AdminStatsOut(BaseModel):
    total_revenue: float
    total_sales: int
    total_students: int
    refunded_amount: float
    net_revenue: float


class AdminOrderRow(BaseModel):
    """Flat order row: the orders table and the orders.csv export share it."""
    id: int
    student_name: Optional[str] = None
    student_email: Optional[str] = None
    student_mobile: Optional[str] = None
    college_name: Optional[str] = None
    course_title: str
    amount_paid: float
    payment_status: str
    payment_id: str
    purchased_at: datetime


class StudentRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    mobile: Optional[str] = None
    college_name: Optional[str] = None
    year: Optional[str] = None
    created_at: datetime


class AdminOverviewOut(BaseModel):
    stats: AdminStatsOut
    orders: List[AdminOrderRow]
    students: List[StudentRow]


class RefundResponse(BaseModel):
    success: bool = True
    order_id: int
    payment_status: str
    notice: Notice
