"""
Email notification for new consultation requests.

Sends a plain-text + HTML message to the practice inbox over SMTP.
SSL on port 465 by default; STARTTLS when ``use_ssl`` is off.
"""

from __future__ import annotations

import html
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from loguru import logger

from ..core.exceptions import NotificationError
from .models import ContactRequest

DEFAULT_SMTP_SERVER = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 465
DEFAULT_SENDER = '"Hanvitt Advisors" <noreply@hanvitt.in>'
DEFAULT_RECIPIENT = "help@hanvitt.in"
DEFAULT_TIMEOUT = 30


class ContactNotifier:
    """Email the practice whenever a visitor asks for a consultation.

    Args:
        smtp_server: SMTP host.
        smtp_port: SMTP port (465 for SSL, 587 for STARTTLS).
        user / password: SMTP login; when empty no login is attempted.
        sender: From header.
        recipient: Practice inbox.
        use_ssl: Connect with implicit TLS instead of STARTTLS.
    """

    def __init__(
        self,
        smtp_server: str = DEFAULT_SMTP_SERVER,
        smtp_port: int = DEFAULT_SMTP_PORT,
        user: str = "",
        password: str = "",
        sender: str = DEFAULT_SENDER,
        recipient: str = DEFAULT_RECIPIENT,
        use_ssl: bool = True,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self.smtp_server = smtp_server
        self.smtp_port = int(smtp_port)
        self.user = user
        self.password = password
        self.sender = sender
        self.recipient = recipient
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> ContactNotifier:
        return cls(
            smtp_server=config.get("smtp.host", DEFAULT_SMTP_SERVER),
            smtp_port=config.get("smtp.port", DEFAULT_SMTP_PORT),
            user=config.get("smtp.user", "") or "",
            password=config.get("smtp.password", "") or "",
            sender=config.get("contact.sender", DEFAULT_SENDER),
            recipient=config.get("contact.recipient", DEFAULT_RECIPIENT),
            use_ssl=str(config.get("smtp.use_ssl", True)).lower() not in ("false", "0", "no"),
            timeout=int(config.get("smtp.timeout", DEFAULT_TIMEOUT)),
        )

    def build_message(self, request: ContactRequest) -> MIMEMultipart:
        phone = request.phone or "N/A"
        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = self.recipient
        msg["Subject"] = f"New Consultation Request from {request.name}"

        text_body = (
            f"Name: {request.name}\n"
            f"Email: {request.email}\n"
            f"Phone: {phone}\n"
            f"Message: {request.message}\n"
        )
        html_body = (
            "<h3>New Consultation Request</h3>\n"
            f"<p><strong>Name:</strong> {html.escape(request.name)}</p>\n"
            f"<p><strong>Email:</strong> {html.escape(request.email)}</p>\n"
            f"<p><strong>Phone:</strong> {html.escape(phone)}</p>\n"
            f"<p><strong>Message:</strong> {html.escape(request.message)}</p>\n"
        )
        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))
        return msg

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.smtp_server, self.smtp_port, timeout=self.timeout)
        server = smtplib.SMTP(self.smtp_server, self.smtp_port, timeout=self.timeout)
        server.starttls()
        return server

    def notify(self, request: ContactRequest) -> None:
        """Send the notification.

        Raises:
            NotificationError: Connection, authentication or delivery failed.
        """
        msg = self.build_message(request)
        try:
            with self._connect() as server:
                if self.user and self.password:
                    server.login(self.user, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"Could not email contact request #{request.id}: {e}") from e

        logger.info(f"Notified {self.recipient} of contact request #{request.id}")
