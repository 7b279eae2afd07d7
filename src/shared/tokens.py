"""Signed bearer tokens.

Tokens are HS256 JWTs carrying ``{userId, role, iat, exp}`` and expire seven
days after issue. The signing secret comes from ``JWT_SECRET``; when it is
unset a development secret is used and a warning is logged once.
"""

import os
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
import structlog

from shared.exceptions import AuthenticationError

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(days=7)

_DEV_SECRET = "freshcart-development-secret-change-me"
_warned_about_default = False


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    user_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def signing_secret() -> str:
    global _warned_about_default
    secret = os.getenv("JWT_SECRET")
    if secret:
        return secret
    if not _warned_about_default:
        logger.warning("JWT_SECRET is not set; signing tokens with the insecure development secret")
        _warned_about_default = True
    return _DEV_SECRET


def issue_token(user_id: str, role: str, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(UTC)
    payload = {
        "userId": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + TOKEN_TTL,
    }
    return jwt.encode(payload, signing_secret(), algorithm=ALGORITHM)


def decode_token(token: str) -> Principal:
    """Verify signature and expiry, returning the embedded principal."""
    try:
        payload = jwt.decode(token, signing_secret(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError("Invalid token") from exc

    user_id = payload.get("userId")
    role = payload.get("role")
    if not user_id or not role:
        raise AuthenticationError("Invalid token")
    return Principal(user_id=user_id, role=role)
