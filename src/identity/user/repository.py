"""Custom repository for User lookups by email."""

from identity.domain import identity
from identity.user.user import User, normalize_email


@identity.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=normalize_email(email)).all().items
        return results[0] if results else None
