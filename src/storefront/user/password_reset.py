"""Two-phase password reset — issue a token by email, then redeem it once.

Issuing and mailing happen in the same unit of work: when the email cannot be
sent the handler raises and the token is never stored.
"""

import os
import secrets
from urllib.parse import urlencode

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.channel import get_email_channel
from storefront.channel.email_port import EmailDeliveryError, delivered
from storefront.domain import logger, storefront
from storefront.templates.password_reset import PasswordResetTemplate
from storefront.user.passwords import hash_password
from storefront.user.user import User


def reset_link_for(token: str) -> str:
    base_url = os.environ.get("APP_BASE_URL", "http://localhost:3000").rstrip("/")
    return f"{base_url}/reset-password?{urlencode({'token': token})}"


@storefront.command(part_of="User")
class RequestPasswordReset:
    email = String(required=True, max_length=254)


@storefront.command(part_of="User")
class ResetPassword:
    token = String(required=True, max_length=64)
    new_password = String(required=True, min_length=6, max_length=128)


@storefront.command_handler(part_of=User)
class PasswordResetHandler:
    @handle(RequestPasswordReset)
    def request_password_reset(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None:
            raise ObjectNotFoundError("Email not found")

        token = secrets.token_hex(32)
        user.issue_reset_token(token)
        repo.add(user)

        message = PasswordResetTemplate.render({"name": user.name, "reset_link": reset_link_for(token)})
        result = get_email_channel().deliver(user.email, message)
        if not delivered(result):
            logger.error("password_reset_email_failed", user_id=str(user.id), error=result.get("error"))
            raise EmailDeliveryError(result.get("error") or "Email delivery failed")

        logger.info("password_reset_requested", user_id=str(user.id))

    @handle(ResetPassword)
    def reset_password(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_reset_token(command.token)
        if user is None:
            raise ValidationError({"token": ["Invalid or expired token"]})

        user.reset_password(command.token, hash_password(command.new_password))
        repo.add(user)

        logger.info("password_reset_completed", user_id=str(user.id))
