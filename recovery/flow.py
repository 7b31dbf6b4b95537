"""
Password reset orchestration.

Per email address the flow moves between two states: no code, or a single
pending code.  Requesting a reset issues (or replaces) the pending code and
emails it; confirming with the live code replaces the password hash and
drops the code.
"""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .errors import AccountNotFound, InvalidOrExpiredCode, PersistenceFailure
from .mail import DeliveryResult, EmailDispatcher, OutboundEmail
from .registry import ResetCodeRegistry

logger = logging.getLogger(__name__)


class AccountDirectory(Protocol):
    def exists(self, email: str) -> bool:
        ...

    def set_password(self, email: str, new_password: str) -> None:
        ...


@dataclass
class ResetRequestOutcome:
    accepted: bool
    email_sent: bool
    delivery: DeliveryResult
    dev_code: Optional[str] = None


def build_reset_email(email: str, code: str, ttl_minutes: int, app_name: str) -> OutboundEmail:
    text = (
        f"Your {app_name} verification code is: {code}\n\n"
        f"The code expires in {ttl_minutes} minutes. "
        "If you did not request a password reset you can ignore this email."
    )
    body = (
        f"<p>Your {html.escape(app_name)} verification code is: <strong>{code}</strong></p>"
        f"<p>The code expires in {ttl_minutes} minutes. "
        "If you did not request a password reset you can ignore this email.</p>"
    )
    return OutboundEmail(
        to=[email],
        subject=f"{app_name} Password Reset Code",
        text=text,
        html=body,
    )


class PasswordResetFlow:
    def __init__(
        self,
        registry: ResetCodeRegistry,
        dispatcher: EmailDispatcher,
        accounts: AccountDirectory,
        expose_codes: bool = False,
        app_name: str = "QuickCart",
    ) -> None:
        self.registry = registry
        self.dispatcher = dispatcher
        self.accounts = accounts
        self.expose_codes = expose_codes
        self.app_name = app_name

    def request_reset(self, email: str) -> ResetRequestOutcome:
        if not self.accounts.exists(email):
            raise AccountNotFound()
        code = self.registry.issue(email)
        ttl_minutes = max(1, int(self.registry.ttl_seconds // 60))
        result = self.dispatcher.send(build_reset_email(email, code, ttl_minutes, self.app_name))
        if not result.delivered:
            logger.warning("Reset code for %s not emailed (%s)", email, result.status.value)
        return ResetRequestOutcome(
            accepted=True,
            email_sent=result.delivered,
            delivery=result,
            dev_code=code if self.expose_codes else None,
        )

    def confirm_reset(self, email: str, code: str, new_password: str) -> None:
        if not self.registry.validate(email, code):
            raise InvalidOrExpiredCode()
        if not self.accounts.exists(email):
            raise AccountNotFound("User not found")
        try:
            self.accounts.set_password(email, new_password)
        except Exception as exc:
            logger.exception("Password update for %s failed", email)
            raise PersistenceFailure() from exc
        self.registry.consume(email)
        logger.info("Password reset completed for %s", email)
