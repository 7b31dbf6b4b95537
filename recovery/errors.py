"""
Error taxonomy for the password recovery flow.

Each error carries the HTTP status it should surface as so the web layer can
translate it without knowing about individual failure modes.
"""
from __future__ import annotations


class RecoveryError(Exception):
    """Base class for per-request password recovery failures."""

    status_code: int = 400
    message: str = "Password recovery failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class AccountNotFound(RecoveryError):
    status_code = 404
    message = "No account found"


class InvalidOrExpiredCode(RecoveryError):
    status_code = 400
    message = "Invalid or expired code"


class DeliveryFailure(RecoveryError):
    """Raised only where a caller explicitly asks for delivery to succeed."""

    status_code = 502
    message = "Email delivery failed"


class PersistenceFailure(RecoveryError):
    status_code = 500
    message = "Error resetting password"


class EmailNotConfigured(DeliveryFailure):
    status_code = 503
    message = "No email provider configured"
