"""
storefront/schemas/catalog.py
Course records as they cross the API / seed boundary
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from storefront.schemas.common import StrictModel


class CourseModule(StrictModel):
    """One syllabus module: a title and its topic list."""
    title: str = Field(..., min_length=1, max_length=200)
    topics: List[str] = Field(default_factory=list)


class CourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    mode: str
    original_price: float
    discounted_price: float
    features: List[str] = Field(default_factory=list)
    modules: List[CourseModule] = Field(default_factory=list)
    seats_remaining: Optional[int] = None
    limited_seats: bool = False
    batch_start_date: Optional[str] = None


class CourseSummary(BaseModel):
    """Course fields embedded in cart lines and orders."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    mode: str
    discounted_price: float


class CourseSeed(StrictModel):
    """
    Catalogue entry accepted by the seed command.
    Unknown or missing fields are rejected.
    """
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    mode: str = Field(..., min_length=1, max_length=50)
    original_price: float = Field(..., ge=0)
    discounted_price: float = Field(..., ge=0)
    features: List[str]
    modules: List[CourseModule]
    seats_remaining: Optional[int] = Field(None, ge=0)
    limited_seats: bool
    batch_start_date: Optional[str] = None

    @model_validator(mode="after")
    def check_discount(self):
        if self.discounted_price > self.original_price:
            raise ValueError("discounted_price cannot exceed original_price")
        return self
