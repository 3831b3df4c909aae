"""
storefront/routes/auth.py
Signup, login, token refresh and logout, with rate limiting
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config.settings import rate_limit_enabled
from storefront.database import get_db
from storefront.errors import ErrorCode, raise_unauthorized
from storefront.exceptions import EmailAlreadyRegisteredError
from storefront.orm.user import User
from storefront.schemas.auth import (
    RefreshTokenRequest,
    Token,
    UserLogin,
    UserRegister,
    UserResponse,
)
from storefront.security.rbac import (
    get_current_user,
    hash_password_async,
    issue_tokens,
    refresh_access_token,
    verify_password_async,
)
from storefront.services import profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])
limiter = Limiter(key_func=get_remote_address, enabled=rate_limit_enabled())


async def _authenticate(email: str, password: str, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    password_valid = False
    if user and user.is_active:
        password_valid = await verify_password_async(password, user.password_hash)

    if not user or not password_valid:
        logger.warning(f"Invalid credentials for email: {email}")
        raise_unauthorized("Invalid email or password", ErrorCode.AUTH_INVALID)
    return user


# ================= ROUTES =================

@router.post("/register", response_model=Token, status_code=201)
@limiter.limit("10/minute")
async def register(
    request: Request,  # Required by slowapi
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db),
):
    """
    Create the login and the student profile in one commit.
    """
    email = user_data.email.lower()
    logger.info(f"Registration attempt for email: {email}")

    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        logger.warning(f"Email already registered: {email}")
        raise EmailAlreadyRegisteredError()

    password_hash = await hash_password_async(user_data.password)

    user = User(email=email, password_hash=password_hash)
    profile = profile_service.build_profile(
        user,
        full_name=user_data.full_name,
        mobile=user_data.mobile,
        college_name=user_data.college_name,
        year=user_data.year,
    )
    db.add_all([user, profile])
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise EmailAlreadyRegisteredError()
    await db.refresh(user)

    logger.info(f"User registered successfully: {email}")
    return await issue_tokens(user, db)


@router.post("/login", response_model=Token)
@limiter.limit("30/minute")
async def login(
    request: Request,  # Required by slowapi
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db),
):
    """Login with a JSON body."""
    email = credentials.email.lower()
    logger.info(f"Login attempt for email: {email}")

    user = await _authenticate(email, credentials.password, db)
    tokens = await issue_tokens(user, db)

    logger.info(f"User logged in successfully: {email}")
    return tokens


@router.post("/login/form", response_model=Token)
@limiter.limit("30/minute")
async def login_form(
    request: Request,  # Required by slowapi
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Login with form data (OAuth2 password flow, used by /docs)."""
    user = await _authenticate(form_data.username.strip().lower(), form_data.password, db)
    return await issue_tokens(user, db)


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/refresh", response_model=Token)
async def refresh_token(
    body: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    return await refresh_access_token(body.refresh_token, db)


@router.post("/logout")
async def logout(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    End the session by revoking the stored refresh token.
    The access token simply runs out.
    """
    current_user.refresh_token = None
    current_user.refresh_token_expires = None
    await db.commit()
    logger.info(f"User {current_user.id} logged out successfully")

    return {
        "success": True,
        "message": "Logged out successfully"
    }
