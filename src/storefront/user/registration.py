"""Account registration and credential checks."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.user.passwords import hash_password, verify_password
from storefront.user.user import User


@storefront.command(part_of="User")
class RegisterUser:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password = String(required=True, min_length=6, max_length=128)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=hash_password(command.password),
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id))
        return str(user.id)


def authenticate(email, password):
    """Return the user owning these credentials, or None."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_rejected", reason="bad_credentials")
        return None
    return user
