"""Email channel registry.

Uses the fake adapter unless ``EMAIL_ADAPTER=smtp`` is set.
"""

import os

from storefront.channel.email_port import EmailPort

_email_instance: EmailPort | None = None


def get_email_channel() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_instance
    if _email_instance is None:
        adapter = os.environ.get("EMAIL_ADAPTER", "fake")
        if adapter == "fake":
            from storefront.channel.fake_email import FakeEmailAdapter

            _email_instance = FakeEmailAdapter()
        elif adapter == "smtp":
            from storefront.channel.smtp_email import SmtpEmailAdapter

            _email_instance = SmtpEmailAdapter()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")
    return _email_instance


def reset_channels():
    """Drop the adapter singleton so the next call re-reads the environment."""
    global _email_instance
    _email_instance = None
