"""Opening a session: credential check followed by token issue."""

import structlog
from protean.utils.globals import current_domain

from identity.auth.passwords import verify_password
from identity.user.user import User
from shared.exceptions import AuthenticationError, NotFoundError
from shared.tokens import issue_token

logger = structlog.get_logger(__name__)


def open_session(email: str, password: str) -> dict:
    """Return ``{"token": ..., "user": summary}`` for valid credentials.

    Raises NotFoundError for an unknown email and AuthenticationError for a
    password mismatch.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None:
        raise NotFoundError("User not found")

    if not verify_password(user.password_hash, password):
        logger.info("Rejected login with wrong password", user_id=str(user.id))
        raise AuthenticationError("Invalid credentials")

    logger.info("Opened session", user_id=str(user.id), role=user.role)
    return {"token": issue_token(user.id, user.role), "user": user.summary()}
