"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductAdded:
    """An admin added a product to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    added_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """An admin changed one or more product fields."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: String()
    price: Float()
    is_active: Boolean()
