"""User registration: command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import Role, User
from shared.exceptions import ConflictError

logger = structlog.get_logger(__name__)


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account. Carries the password hash, never the plaintext."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)
    role: String(max_length=20, default=Role.SHOPPER.value)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            logger.info("Rejecting registration for an email already in use")
            raise ConflictError("Email already registered")

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
            phone=command.phone,
            role=command.role,
        )
        repo.add(user)
        logger.info("Registered new user", user_id=str(user.id), role=user.role)
        return str(user.id)
