"""Catalogue bounded context: the grocery product catalogue.

Products are managed by admins and browsed by everyone. Ordering reads the
live catalogue at placement time to price line items.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

catalogue = Domain(name="catalogue")
