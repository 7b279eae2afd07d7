"""Identity bounded context: shoppers, administrators and their credentials.

Owns the credential store (users with hashed passwords and a role flag),
saved delivery addresses, and the session issuer that turns verified
credentials into bearer tokens.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

identity = Domain(name="identity")
