"""
Authentication and user account endpoints.

This router exposes registration and login endpoints that return a JWT access
token, a whoami endpoint and a logout endpoint that revokes the caller's token.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session

from ..schemas import RegisterRequest, LoginRequest, AuthResponse, UserRead
from ..deps import get_db, get_current_user
from ..services import auth as auth_service
from ..security import oauth2_scheme, revoked_tokens
from ..audit import log_action


router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account and return an access token for it."""
    user = auth_service.create_user(db, payload)
    log_action("register", user_id=user.id)
    return {
        "token": auth_service.issue_access_token(user),
        "user": user,
        "message": "Account created successfully!",
    }


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate user credentials and return an access token along with user info."""
    user = auth_service.authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    log_action("login", user_id=user.id)
    return {
        "token": auth_service.issue_access_token(user),
        "user": user,
        "message": "Login successful!",
    }


@router.get("/me", response_model=UserRead)
def me(current_user=Depends(get_current_user)):
    """Return information about the currently authenticated user."""
    return current_user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(current_token: str = Depends(oauth2_scheme), current_user=Depends(get_current_user)):
    """Invalidate the caller's current JWT access token."""
    revoked_tokens.add(current_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
