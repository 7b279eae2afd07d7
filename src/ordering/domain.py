"""Ordering bounded context: order placement and the order status lifecycle.

Orders snapshot their line items at placement time. Prices are resolved
against the live catalogue, never taken from the client.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
