"""ChangeUserRole — admin-only promotion and demotion of accounts."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.user.user import User, UserRole


@storefront.command(part_of="User")
class ChangeUserRole:
    user_id = Identifier(required=True)
    role = String(required=True, choices=UserRole)


@storefront.command_handler(part_of=User)
class ChangeUserRoleHandler:
    @handle(ChangeUserRole)
    def change_user_role(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.change_role(command.role)
        repo.add(user)
        logger.info("user_role_changed", user_id=str(user.id), role=user.role)
