"""Saved delivery addresses: command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User


@identity.command(part_of="User")
class AddAddress:
    """Save a new delivery address to a user's address book."""

    user_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    postal_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)


@identity.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        user.add_address(
            street=command.street,
            city=command.city,
            state=command.state,
            postal_code=command.postal_code,
            is_default=bool(command.is_default),
        )
        repo.add(user)
        return [a.snapshot() for a in user.addresses]
