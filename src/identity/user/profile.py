"""Profile updates for an existing user."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User


@identity.command(part_of="User")
class UpdateProfile:
    """Change a user's display name and/or phone number."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    phone: String(max_length=20)


@identity.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        updates = {}
        if command.name is not None:
            updates["name"] = command.name
        if command.phone is not None:
            updates["phone"] = command.phone

        user.update_profile(**updates)
        repo.add(user)
        return user.profile()
