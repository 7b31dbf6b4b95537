"""
Contact form and email diagnostics endpoints.

Both go through the shared email dispatcher.  The contact form always reports
success to the visitor; the diagnostic endpoint reports delivery failures so
operators can check provider configuration.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from recovery.errors import DeliveryFailure, EmailNotConfigured
from recovery.mail import DeliveryStatus, EmailDispatcher

from ..config import settings
from ..schemas import ContactRequest, SuccessResponse, EmailTestRequest, EmailTestResponse
from ..deps import get_email_dispatcher
from ..services import email as email_service
from ..audit import log_action

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", response_model=SuccessResponse)
def contact(payload: ContactRequest, dispatcher: EmailDispatcher = Depends(get_email_dispatcher)):
    """Forward a contact form submission to the store administrator."""
    recipient = settings.admin_email or settings.email_user
    delivered = False
    if recipient:
        message = email_service.contact_message(payload.name, payload.email, payload.message, recipient)
        delivered = dispatcher.send(message).delivered
    else:
        logger.warning("Contact form submitted but no ADMIN_EMAIL is configured")
    log_action("contact_submitted", email=payload.email, email_sent=delivered)
    return SuccessResponse(message="Message sent successfully!")


@router.post("/test-email", response_model=EmailTestResponse)
def test_email(payload: EmailTestRequest, dispatcher: EmailDispatcher = Depends(get_email_dispatcher)):
    """Send a test message through the provider chain."""
    result = dispatcher.send(email_service.diagnostic_message(payload.email, settings.app_name))
    if result.status is DeliveryStatus.NOT_CONFIGURED:
        raise EmailNotConfigured()
    if not result.delivered:
        raise DeliveryFailure("Failed to send test email")
    return EmailTestResponse(
        message="Test email sent successfully!",
        provider=result.provider or "",
        to=payload.email,
    )
