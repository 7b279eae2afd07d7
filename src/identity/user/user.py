"""User aggregate root with the Address entity."""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String

from identity.domain import identity

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Role(Enum):
    """Roles a user can hold. Only admins may manage the catalogue and orders."""

    SHOPPER = "shopper"
    ADMIN = "admin"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


@identity.entity(part_of="User")
class Address:
    """A saved delivery address. At most one address per user is the default."""

    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    postal_code: String(required=True, max_length=20)
    is_default: Boolean(default=False)

    def snapshot(self) -> dict:
        return {
            "id": str(self.id),
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "is_default": self.is_default,
        }


@identity.aggregate
class User:
    """A person who can sign in to the storefront, either as a shopper or an admin.

    The password is stored only as a salted one-way hash. Nothing outside this
    context ever sees ``password_hash``; :meth:`summary` and :meth:`profile` are
    the public-safe views.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)
    role: String(choices=Role, default=Role.SHOPPER.value)
    addresses: HasMany(Address)
    created_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not EMAIL_REGEX.match(self.email):
            raise ValidationError({"email": ["Invalid email format"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, name, email, password_hash, phone=None, role=Role.SHOPPER.value):
        from identity.user.events import UserRegistered

        now = datetime.now(UTC)
        user = cls(
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
            phone=phone,
            role=role,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @property
    def default_address(self):
        return next((a for a in self.addresses if a.is_default), None)

    def update_profile(self, name=_UNSET, phone=_UNSET):
        from identity.user.events import ProfileUpdated

        if name is not _UNSET:
            self.name = name
        if phone is not _UNSET:
            self.phone = phone

        self.raise_(
            ProfileUpdated(
                user_id=self.id,
                name=self.name,
                phone=self.phone,
            )
        )

    def add_address(self, street, city, postal_code, state=None, is_default=False):
        from identity.user.events import AddressAdded

        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                street=street,
                city=city,
                state=state,
                postal_code=postal_code,
                is_default=is_default,
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                user_id=self.id,
                address_id=address.id,
                street=street,
                city=city,
                state=state,
                postal_code=postal_code,
                is_default=is_default,
            )
        )
        return address

    def summary(self) -> dict:
        """Public-safe identity returned alongside a freshly issued token."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }

    def profile(self) -> dict:
        return {
            **self.summary(),
            "phone": self.phone,
            "addresses": [a.snapshot() for a in self.addresses],
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
