"""Resolve requested line items against the live catalogue.

The client's cart carries product snapshots, but only the product id and
quantity are trusted. Name, price and image always come from the catalogue.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


def price_line_items(requested: list[dict]) -> list[dict]:
    """Return catalogue-priced line items for ``[{product_id, quantity, ...}]``.

    Raises ValidationError if any product is unknown or inactive, or any
    quantity is below one. Client-sent prices are compared and logged only.
    """
    if not requested:
        raise ValidationError({"items": ["An order must contain at least one item"]})

    priced = []
    errors = []
    with catalogue.domain_context():
        repo = current_domain.repository_for(Product)
        for index, line in enumerate(requested):
            product_id = str(line.get("product_id") or "")
            quantity = line.get("quantity")

            if not isinstance(quantity, int) or quantity < 1:
                errors.append(f"Item {index}: quantity must be at least 1")
                continue

            try:
                product = repo.get(product_id)
            except ObjectNotFoundError:
                errors.append(f"Item {index}: product {product_id} does not exist")
                continue

            if not product.is_active:
                errors.append(f"Item {index}: product {product.name} is not available")
                continue

            client_price = line.get("price")
            if client_price is not None and float(client_price) != product.price:
                logger.warning(
                    "Ignoring client price that differs from catalogue",
                    product_id=product_id,
                    client_price=client_price,
                    catalogue_price=product.price,
                )

            priced.append(
                {
                    "product_id": str(product.id),
                    "name": product.name,
                    "price": product.price,
                    "quantity": quantity,
                    "image": product.image,
                }
            )

    if errors:
        raise ValidationError({"items": errors})
    return priced
