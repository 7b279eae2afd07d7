"""Admin order listing: orders joined with owner and live product details.

Owners live in the identity context and products in the catalogue context,
so each lookup runs inside that context. A deleted product or user expands
to ``None`` rather than failing the listing.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product
from identity.domain import identity
from identity.user.user import User


def _owners(user_ids: set[str]) -> dict[str, dict | None]:
    owners = {}
    with identity.domain_context():
        repo = current_domain.repository_for(User)
        for user_id in user_ids:
            try:
                user = repo.get(user_id)
            except ObjectNotFoundError:
                owners[user_id] = None
                continue
            owners[user_id] = {"name": user.name, "email": user.email, "phone": user.phone}
    return owners


def _products(product_ids: set[str]) -> dict[str, dict | None]:
    products = {}
    with catalogue.domain_context():
        repo = current_domain.repository_for(Product)
        for product_id in product_ids:
            try:
                products[product_id] = repo.get(product_id).to_payload()
            except ObjectNotFoundError:
                products[product_id] = None
    return products


def expand_orders(orders) -> list[dict]:
    payloads = [order.to_payload() for order in orders]

    owners = _owners({p["user_id"] for p in payloads})
    products = _products({item["product_id"] for p in payloads for item in p["items"]})

    for payload in payloads:
        payload["user"] = owners.get(payload["user_id"])
        for item in payload["items"]:
            item["product"] = products.get(item["product_id"])
    return payloads
