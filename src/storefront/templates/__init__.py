"""Transactional email templates.

Each template exposes a static ``render(context) -> {"subject", "body", "html_body"}``.
"""

from storefront.templates.order_confirmation import OrderConfirmationTemplate
from storefront.templates.password_reset import PasswordResetTemplate

__all__ = ["OrderConfirmationTemplate", "PasswordResetTemplate"]
