"""
FastAPI dependency functions for common operations.

Includes dependencies to get a database session, the current authenticated
user and the password recovery components shared by the application.
"""
from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from recovery.flow import PasswordResetFlow
from recovery.mail import EmailDispatcher
from recovery.registry import ResetCodeRegistry

from . import models
from .db import get_db
from .security import oauth2_scheme, decode_access_token
from .services import reset as reset_service


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> models.User:
    """Retrieve the currently authenticated user based on the JWT access token."""
    token_data = decode_access_token(token)
    user = db.query(models.User).filter(models.User.id == token_data.user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_reset_registry(request: Request) -> ResetCodeRegistry:
    return request.app.state.reset_registry


def get_email_dispatcher(request: Request) -> EmailDispatcher:
    return request.app.state.email_dispatcher


def get_reset_flow(
    db: Session = Depends(get_db),
    registry: ResetCodeRegistry = Depends(get_reset_registry),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
) -> PasswordResetFlow:
    return reset_service.build_flow(db, registry, dispatcher)
