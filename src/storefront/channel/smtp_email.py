"""SMTP email adapter for production delivery.

Configured from the environment:
    SMTP_HOST, SMTP_PORT (default 587), SMTP_USERNAME, SMTP_PASSWORD,
    SMTP_USE_TLS (default "true"), EMAIL_FROM.
"""

import os
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from storefront.channel.email_port import FAILED, SENT, EmailPort

logger = structlog.get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool | None = None,
        sender: str | None = None,
        timeout: float = 10.0,
    ):
        self.host = host or os.environ.get("SMTP_HOST", "localhost")
        self.port = port or int(os.environ.get("SMTP_PORT", "587"))
        self.username = username if username is not None else os.environ.get("SMTP_USERNAME")
        self.password = password if password is not None else os.environ.get("SMTP_PASSWORD")
        if use_tls is None:
            use_tls = os.environ.get("SMTP_USE_TLS", "true").lower() in ("1", "true", "yes")
        self.use_tls = use_tls
        self.sender = sender or os.environ.get("EMAIL_FROM", "SwiftCart <no-reply@swiftcart.local>")
        self.timeout = timeout

    def _build_message(self, to, subject, body, html_body):
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain="swiftcart")
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        message = self._build_message(to, subject, body, html_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username:
                    server.login(self.username, self.password or "")
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("smtp_send_failed", host=self.host, error=str(exc))
            return {"message_id": None, "status": FAILED, "error": str(exc)}

        return {"message_id": message["Message-ID"], "status": SENT}
