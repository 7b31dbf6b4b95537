"""
Outbound email with an ordered provider fallback chain.

The dispatcher walks a list of senders in order and stops at the first one
that accepts the message.  Sender failures are logged and recorded on the
returned :class:`DeliveryResult`; the dispatcher itself never raises so email
outages cannot break the flows that trigger a message.
"""
from __future__ import annotations

import enum
import logging
import smtplib
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Any, Dict, List, Optional, Protocol, Sequence

import resend

logger = logging.getLogger(__name__)


@dataclass
class OutboundEmail:
    to: List[str]
    subject: str
    text: str
    html: Optional[str] = None
    sender: Optional[str] = None
    reply_to: Optional[str] = None


class DeliveryStatus(str, enum.Enum):
    DELIVERED = "delivered"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


@dataclass
class DeliveryAttempt:
    provider: str
    error: Optional[str] = None


@dataclass
class DeliveryResult:
    status: DeliveryStatus
    provider: Optional[str] = None
    attempts: List[DeliveryAttempt] = field(default_factory=list)

    @property
    def delivered(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED


class EmailSender(Protocol):
    name: str

    def is_configured(self) -> bool:
        ...

    def send(self, message: OutboundEmail) -> None:
        """Deliver ``message`` or raise."""
        ...


class ResendSender:
    """Transactional email through the Resend HTTPS API."""

    name = "resend"

    def __init__(self, api_key: Optional[str], default_sender: str) -> None:
        self.api_key = (api_key or "").strip()
        self.default_sender = default_sender
        # The SDK reads its key from module state; there is one key per process.
        if self.api_key:
            resend.api_key = self.api_key

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _payload(self, message: OutboundEmail) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "from": message.sender or self.default_sender,
            "to": list(message.to),
            "subject": message.subject,
            "text": message.text,
        }
        if message.html:
            payload["html"] = message.html
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        return payload

    def send(self, message: OutboundEmail) -> None:
        response = resend.Emails.send(self._payload(message))
        if not isinstance(response, dict) or not response.get("id"):
            raise RuntimeError(f"Resend rejected message: {response!r}")


class SmtpSender:
    """Plain SMTP delivery with STARTTLS, e.g. a Gmail app password."""

    name = "smtp"

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = int(port)
        self.username = username or ""
        self.password = password or ""
        self.use_tls = use_tls
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.host and self.username and self.password)

    def _build(self, message: OutboundEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = message.sender or self.username
        msg["To"] = ", ".join(message.to)
        if message.reply_to:
            msg["Reply-To"] = message.reply_to
        msg.set_content(message.text)
        if message.html:
            msg.add_alternative(message.html, subtype="html")
        return msg

    def send(self, message: OutboundEmail) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            server.login(self.username, self.password)
            server.send_message(self._build(message))


class EmailDispatcher:
    def __init__(self, senders: Sequence[EmailSender]) -> None:
        self.senders = list(senders)

    def configured_providers(self) -> List[str]:
        return [s.name for s in self.senders if s.is_configured()]

    def send(self, message: OutboundEmail) -> DeliveryResult:
        """Try each configured sender in order until one succeeds."""
        attempts: List[DeliveryAttempt] = []
        for sender in self.senders:
            if not sender.is_configured():
                continue
            try:
                sender.send(message)
            except Exception as exc:
                logger.warning("Email via %s failed: %s", sender.name, exc)
                attempts.append(DeliveryAttempt(provider=sender.name, error=str(exc)))
                continue
            attempts.append(DeliveryAttempt(provider=sender.name))
            logger.info("Email '%s' delivered via %s", message.subject, sender.name)
            return DeliveryResult(DeliveryStatus.DELIVERED, provider=sender.name, attempts=attempts)

        if not attempts:
            logger.warning("No email provider configured; dropping '%s'", message.subject)
            return DeliveryResult(DeliveryStatus.NOT_CONFIGURED)
        logger.error("All email providers failed for '%s'", message.subject)
        return DeliveryResult(DeliveryStatus.FAILED, attempts=attempts)
