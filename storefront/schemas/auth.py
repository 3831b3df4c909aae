"""
storefront/schemas/auth.py
Signup / login / token records
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from storefront.schemas.common import StrictModel


class UserRegister(StrictModel):
    """
    Registration creates the login and the student profile together.
    """
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=200)
    mobile: Optional[str] = Field(None, max_length=20)
    college_name: Optional[str] = Field(None, max_length=255)
    year: Optional[str] = Field(None, max_length=20)


class UserLogin(StrictModel):
    """JSON login schema"""
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user_id: int


class RefreshTokenRequest(StrictModel):
    refresh_token: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    is_active: bool


class SessionOut(BaseModel):
    """Navigation context: who is signed in, admin link, cart badge."""
    user_id: int
    email: str
    full_name: Optional[str] = None
    is_admin: bool
    cart_items_count: int
