"""Application exceptions shared by every bounded context.

Domain rule violations use Protean's ``ValidationError`` and missing
aggregates surface as Protean's ``ObjectNotFoundError``. The classes below
cover the cases Protean has no exception for. ``app.py`` maps each of them to
an HTTP status.
"""


class FreshCartError(Exception):
    """Base class for application errors that carry a client-safe message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(FreshCartError):
    """The request collides with existing state (e.g. a duplicate email)."""

    status_code = 409


class NotFoundError(FreshCartError):
    """A referenced user, product or order does not exist."""

    status_code = 404


class AuthenticationError(FreshCartError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class AccessDeniedError(FreshCartError):
    """The caller is authenticated but lacks the role or ownership required."""

    status_code = 403
