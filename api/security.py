"""
Security utilities for authentication and authorization.

This module provides password hashing with bcrypt, JWT token generation and
verification, and an OAuth2 password bearer scheme for FastAPI endpoints.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional, Set

from fastapi import HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings
from .schemas import TokenData


# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# The token is taken from the Authorization header as "Bearer <token>".
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")

ALGORITHM = "HS256"

# Tokens revoked through the logout endpoint.  Process-local; cleared on
# restart.
revoked_tokens: Set[str] = set()


def is_token_revoked(token: str) -> bool:
    """Return True if the given JWT has been revoked."""
    return token in revoked_tokens


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a hashed password."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def create_access_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a new JWT access token.

    The token contains the given data payload and expires after the specified
    delta (or the default from settings).  The `exp` claim is a Unix timestamp.
    """
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """Decode a JWT access token and return the contained data.

    Raises an HTTPException if the token is invalid, expired or revoked.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if is_token_revoked(token):
        raise credentials_exception
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
        subject = payload.get("sub")  # subject is the user id
        if subject is None:
            raise credentials_exception
        token_data = TokenData(user_id=int(subject))
    except (JWTError, ValueError):
        raise credentials_exception
    return token_data
