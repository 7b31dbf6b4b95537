"""
Email delivery wiring.

Builds the provider fallback chain (Resend first, SMTP second) from settings
and composes the application's non-reset messages.
"""
from __future__ import annotations

import html

from recovery.mail import EmailDispatcher, OutboundEmail, ResendSender, SmtpSender

from ..config import Settings, settings as default_settings


def build_dispatcher(cfg: Settings = default_settings) -> EmailDispatcher:
    """Return a dispatcher trying the transactional API before SMTP."""
    return EmailDispatcher(
        [
            ResendSender(cfg.resend_api_key, default_sender=cfg.resend_from),
            SmtpSender(cfg.smtp_host, cfg.smtp_port, cfg.email_user, cfg.email_pass),
        ]
    )


def contact_message(name: str, email: str, message: str, recipient: str) -> OutboundEmail:
    safe_message = html.escape(message).replace("\n", "<br>")
    body = (
        "<h3>New Contact Form Submission</h3>"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        "<p><strong>Message:</strong></p>"
        f'<blockquote style="background:#f9f9f9; padding:15px; border-left:4px solid #ccc;">{safe_message}</blockquote>'
    )
    return OutboundEmail(
        to=[recipient],
        subject=f"New Message from {name}",
        text=f"From: {name} <{email}>\n\n{message}",
        html=body,
        reply_to=email,
    )


def diagnostic_message(email: str, app_name: str) -> OutboundEmail:
    return OutboundEmail(
        to=[email],
        subject=f"Test Email from {app_name} API",
        text=f"This is a test email from your {app_name} backend!",
        html="<h1>Test Email Success!</h1><p>If you can read this, your email configuration is working!</p>",
    )
