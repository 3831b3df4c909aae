"""
storefront/schemas/profile.py
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.common import StrictModel


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    mobile: Optional[str] = None
    college_name: Optional[str] = None
    year: Optional[str] = None
    created_at: datetime


class ProfileUpdate(StrictModel):
    """Fields a student may change. Email is tied to the login and is not editable."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    mobile: Optional[str] = Field(None, max_length=20)
    college_name: Optional[str] = Field(None, max_length=255)
    year: Optional[str] = Field(None, max_length=20)
