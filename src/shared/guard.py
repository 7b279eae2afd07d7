"""FastAPI dependencies that authenticate the caller and enforce roles.

Usage::

    @router.get("/me")
    async def me(principal: Principal = Depends(require_principal)): ...

    @router.post("", dependencies=[Depends(require_admin)])
    async def create(...): ...
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.exceptions import AccessDeniedError, AuthenticationError
from shared.tokens import Principal, decode_token

bearer_scheme = HTTPBearer(auto_error=False)


async def require_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return decode_token(credentials.credentials)


async def require_admin(principal: Principal = Depends(require_principal)) -> Principal:
    if not principal.is_admin:
        raise AccessDeniedError("Admin access required")
    return principal
