"""
Password reset wiring for the web layer.

Adapts the user table to the recovery flow's account directory and builds a
flow instance per request from the application's shared registry and email
dispatcher.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from recovery.flow import PasswordResetFlow
from recovery.mail import EmailDispatcher
from recovery.registry import ResetCodeRegistry

from ..config import settings
from . import auth as auth_service


class SqlAccountDirectory:
    """Credential store backed by the `users` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def exists(self, email: str) -> bool:
        return auth_service.get_user_by_email(self.db, email) is not None

    def set_password(self, email: str, new_password: str) -> None:
        user = auth_service.get_user_by_email(self.db, email)
        if user is None:
            raise LookupError(email)
        auth_service.set_password(self.db, user, new_password)


def build_flow(
    db: Session,
    registry: ResetCodeRegistry,
    dispatcher: EmailDispatcher,
) -> PasswordResetFlow:
    return PasswordResetFlow(
        registry=registry,
        dispatcher=dispatcher,
        accounts=SqlAccountDirectory(db),
        expose_codes=settings.reset_codes_exposed(),
        app_name=settings.app_name,
    )
