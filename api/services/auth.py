"""
Service functions related to authentication and user management.

These functions encapsulate business logic such as creating users,
authenticating credentials and issuing JWT tokens.
"""
from __future__ import annotations

import logging
from typing import Optional
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from .. import models, schemas
from ..security import verify_password, get_password_hash, create_access_token

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == normalize_email(email)).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[models.User]:
    """Validate a user's email and password.

    Returns the user object if authentication is successful, otherwise None.
    """
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, user_in: schemas.RegisterRequest) -> models.User:
    """Create a new user with a hashed password.

    Raises HTTPException if the email already exists.
    """
    if get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    db_user = models.User(
        name=user_in.name,
        email=normalize_email(user_in.email),
        password_hash=get_password_hash(user_in.password),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Registered user %s", db_user.id)
    return db_user


def set_password(db: Session, user: models.User, new_password: str) -> None:
    """Replace a user's password hash, rolling back on failure."""
    user.password_hash = get_password_hash(new_password)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def issue_access_token(user: models.User) -> str:
    """Create a JWT access token for the given user."""
    return create_access_token(data={"sub": str(user.id)})
