"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
    """A new account was created in the credential store."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@identity.event(part_of="User")
class ProfileUpdated:
    """A user's display name or phone number was changed."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    phone: String()


@identity.event(part_of="User")
class AddressAdded:
    """A delivery address was saved to a user's address book."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(required=True)
    city: String(required=True)
    state: String()
    postal_code: String(required=True)
    is_default: Boolean(default=False)
