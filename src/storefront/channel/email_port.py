"""Outbound transactional email.

Adapters implement ``send``; callers normally use ``deliver`` with the
output of a template's ``render``.
"""

from abc import ABC, abstractmethod

SENT = "sent"
FAILED = "failed"


class EmailDeliveryError(Exception):
    """Raised when a message that must be delivered could not be sent."""


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> dict:
        """Send one message.

        Returns ``{"message_id", "status"}`` where status is ``"sent"`` or
        ``"failed"``; failures also carry ``"error"``. Adapters report
        transport problems through the result instead of raising.
        """

    def deliver(self, to: str, rendered: dict) -> dict:
        """Send a rendered template (``subject``, ``body`` and optional ``html_body``)."""
        return self.send(
            to=to,
            subject=rendered["subject"],
            body=rendered["body"],
            html_body=rendered.get("html_body"),
        )


def delivered(result: dict) -> bool:
    return result.get("status") == SENT
