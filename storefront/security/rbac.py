"""
storefront/security/rbac.py
Token, password and identity utilities.

Access tokens carry the user's email in `sub`; refresh tokens carry the
user id and are signed with a separate key. The refresh token is also
stored on the user row so logout can revoke it.
"""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config.settings import (
    SECRET_KEY,
    REFRESH_SECRET_KEY,
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    REFRESH_TOKEN_EXPIRE_DAYS,
)
from storefront.database import get_db
from storefront.errors import ErrorCode, raise_unauthorized
from storefront.orm.user import User

logger = logging.getLogger(__name__)

# bcrypt can block the event loop - hashing runs in a thread pool
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=10,
)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login/form", auto_error=False)

_executor = None


def get_executor():
    global _executor
    if _executor is None:
        _executor = ThreadPoolExecutor(max_workers=4)
    return _executor


# ================= PASSWORDS =================

def normalize_password(password: str) -> str:
    """
    bcrypt only supports 72 bytes.
    Truncate AFTER UTF-8 encoding so multi-byte input stays consistent.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > 72:
        encoded = encoded[:72]
    return encoded.decode("utf-8", errors="ignore")


def hash_password(password: str) -> str:
    return pwd_context.hash(normalize_password(password))


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(normalize_password(plain), hashed)


async def hash_password_async(password: str) -> str:
    """Async-friendly password hashing that doesn't block the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_executor(), hash_password, password)


async def verify_password_async(plain: str, hashed: str) -> bool:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_executor(), verify_password, plain, hashed)


# ================= TOKEN UTILS =================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({
        "exp": expire,
        "type": "access"
    })
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_refresh_token(user_id: int) -> str:
    """Create JWT refresh token"""
    expire = datetime.utcnow() + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode = {
        "sub": str(user_id),
        "exp": expire,
        "type": "refresh",
        # two refreshes inside the same second must still differ
        "iat": datetime.utcnow(),
        "jti": datetime.utcnow().strftime("%Y%m%d%H%M%S%f"),
    }
    return jwt.encode(to_encode, REFRESH_SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str, is_refresh: bool = False) -> Optional[dict]:
    """Decode and validate JWT token"""
    try:
        key = REFRESH_SECRET_KEY if is_refresh else SECRET_KEY
        return jwt.decode(token, key, algorithms=[ALGORITHM])
    except JWTError:
        return None


def refresh_expiry_timestamp() -> int:
    return int((datetime.utcnow() + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)).timestamp())


async def issue_tokens(user: User, db: AsyncSession) -> dict:
    """
    Mint an access/refresh pair and persist the refresh token.
    Commits the session.
    """
    access_token = create_access_token(
        {"sub": user.email, "user_id": user.id},
        timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    refresh_token = create_refresh_token(user.id)

    user.refresh_token = refresh_token
    user.refresh_token_expires = refresh_expiry_timestamp()
    await db.commit()

    return {
        "access_token": access_token,
        "refresh_token": refresh_token,
        "token_type": "bearer",
        "user_id": user.id,
    }


# ================= AUTH DEPENDENCIES =================

async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get current authenticated user from JWT access token.
    Returns 401 if token is missing, invalid or expired.
    """
    if not token:
        raise_unauthorized("Authentication required", ErrorCode.AUTH_REQUIRED)

    payload = decode_token(token)
    if not payload or payload.get("type") != "access":
        raise_unauthorized("Invalid or expired token", ErrorCode.AUTH_INVALID)

    email = payload.get("sub")
    if not email:
        raise_unauthorized("Invalid token payload", ErrorCode.AUTH_INVALID)

    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if not user or not user.is_active:
        raise_unauthorized("User not found", ErrorCode.USER_NOT_FOUND)

    return user


async def refresh_access_token(refresh_token: str, db: AsyncSession) -> dict:
    """
    Rotate tokens using a valid refresh token.
    Returns new tokens or raises 401.
    """
    payload = decode_token(refresh_token, is_refresh=True)
    if not payload or payload.get("type") != "refresh":
        raise_unauthorized("Invalid refresh token", ErrorCode.AUTH_INVALID)

    try:
        user_id = int(payload.get("sub", 0))
    except (TypeError, ValueError):
        raise_unauthorized("Invalid refresh token", ErrorCode.AUTH_INVALID)

    result = await db.execute(
        select(User).where(
            User.id == user_id,
            User.refresh_token == refresh_token,
            User.is_active == True  # noqa: E712
        )
    )
    user = result.scalar_one_or_none()
    if not user:
        raise_unauthorized("Refresh token invalid or expired", ErrorCode.AUTH_EXPIRED)

    if user.refresh_token_expires and datetime.utcnow().timestamp() > user.refresh_token_expires:
        raise_unauthorized("Refresh token expired, please login again", ErrorCode.AUTH_EXPIRED)

    logger.info(f"Refreshed tokens for user {user.id}")
    return await issue_tokens(user, db)
