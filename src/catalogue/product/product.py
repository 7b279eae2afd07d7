"""Product aggregate root."""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from catalogue.domain import catalogue

DEFAULT_RATING = 4.0

# Discounts are whole percentages, so the listed price is rounded
DISCOUNT_TOLERANCE = 1.0

# Fields an admin may change after creation
EDITABLE_FIELDS = (
    "name",
    "description",
    "price",
    "original_price",
    "category",
    "image",
    "stock",
    "unit",
    "discount",
    "rating",
    "is_active",
)


@catalogue.aggregate
class Product:
    """A grocery item on sale, e.g. "Fresh Tomatoes, 500g"."""

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    original_price: Float(min_value=0.0)
    category: String(required=True, max_length=100)
    image: String(max_length=1000)
    stock: Integer(default=0, min_value=0)
    unit: String(max_length=50)
    discount: Integer(default=0, min_value=0, max_value=100)
    rating: Float(default=DEFAULT_RATING, min_value=0.0, max_value=5.0)
    is_active: Boolean(default=True)
    created_at: DateTime()

    @invariant.post
    def discounted_price_must_match_original_price(self):
        if self.original_price is None or not self.discount:
            return
        expected = self.original_price * (1 - self.discount / 100)
        if abs(self.price - expected) > DISCOUNT_TOLERANCE:
            raise ValidationError(
                {
                    "price": [
                        f"Price {self.price} does not match original price {self.original_price} "
                        f"less {self.discount}% discount"
                    ]
                }
            )

    @classmethod
    def create(
        cls,
        name,
        price,
        category,
        description=None,
        original_price=None,
        image=None,
        stock=0,
        unit=None,
        discount=0,
        rating=DEFAULT_RATING,
        is_active=True,
    ):
        from catalogue.product.events import ProductAdded

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            original_price=original_price,
            category=category,
            image=image,
            stock=stock,
            unit=unit,
            discount=discount,
            rating=rating,
            is_active=is_active,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,
                added_at=now,
            )
        )
        return product

    def revise(self, **changes):
        """Apply a partial update. Unknown fields are rejected."""
        from catalogue.product.events import ProductUpdated

        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        with atomic_change(self):
            for field, value in changes.items():
                setattr(self, field, value)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=",".join(sorted(changes)),
                price=self.price,
                is_active=self.is_active,
            )
        )

    def to_payload(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "original_price": self.original_price,
            "category": self.category,
            "image": self.image,
            "stock": self.stock,
            "unit": self.unit,
            "discount": self.discount,
            "rating": self.rating,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
