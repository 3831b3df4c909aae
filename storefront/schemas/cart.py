"""
storefront/schemas/cart.py
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.catalog import CourseSummary
from storefront.schemas.common import Notice, StrictModel


class AddToCartRequest(StrictModel):
    course_id: int = Field(..., gt=0, description="ID of the course to add")


class CartLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    course: CourseSummary


class CartOut(BaseModel):
    items: List[CartLineOut]
    count: int
    total: float


class CartCountOut(BaseModel):
    count: int


class CartMutationResponse(BaseModel):
    success: bool = True
    notice: Notice
    cart_count: int
