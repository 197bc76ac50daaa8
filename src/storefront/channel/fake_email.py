"""In-memory email adapter used in development and tests."""

from itertools import count

from storefront.channel.email_port import FAILED, SENT, EmailPort


class FakeEmailAdapter(EmailPort):
    """Keeps every accepted message in ``sent_emails``.

    ``configure(should_succeed=False)`` makes later sends fail; the refused
    messages are kept in ``failed_attempts`` instead.
    """

    DEFAULT_FAILURE = "Email delivery failed"

    def __init__(self):
        self._ids = count(1)
        self.sent_emails: list[dict] = []
        self.failed_attempts: list[dict] = []
        self.should_succeed = True
        self.failure_reason = self.DEFAULT_FAILURE

    def configure(self, should_succeed: bool = True, failure_reason: str = DEFAULT_FAILURE):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> dict:
        message = {"to": to, "subject": subject, "body": body, "html_body": html_body}

        if not self.should_succeed:
            self.failed_attempts.append(message)
            return {"message_id": None, "status": FAILED, "error": self.failure_reason}

        message["message_id"] = f"fake-{next(self._ids):06d}"
        self.sent_emails.append(message)
        return {"message_id": message["message_id"], "status": SENT}

    def sent_to(self, address: str) -> list[dict]:
        return [message for message in self.sent_emails if message["to"] == address]

    def reset(self):
        self.sent_emails.clear()
        self.failed_attempts.clear()
        self.configure()
