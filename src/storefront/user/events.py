"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A shopper created an account."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    name = String(required=True)


@storefront.event(part_of="User")
class UserRoleChanged:
    __version__ = 1

    user_id = Identifier(required=True)
    previous_role = String(required=True)
    new_role = String(required=True)


@storefront.event(part_of="User")
class PasswordResetRequested:
    """A reset token was issued. The token itself is never carried on the event."""

    __version__ = 1

    user_id = Identifier(required=True)
    expires_at = DateTime(required=True)


@storefront.event(part_of="User")
class PasswordChanged:
    __version__ = 1

    user_id = Identifier(required=True)
    changed_at = DateTime(required=True)
