"""Order aggregate with its line-item snapshot and status state machine.

State Machine:
    pending → confirmed → preparing → out-for-delivery → delivered
    cancelled (from any state before delivered)

Orders are cash on delivery: payment is collected when the order is
delivered and fails when it is cancelled.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged

# Rounding slack when comparing a stored total with its line items
_TOTAL_TOLERANCE = 0.01

_ADDRESS_FIELDS = ("name", "phone", "street", "city", "state", "postal_code")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class PaymentMethod(Enum):
    COD = "cod"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PREPARING, OrderStatus.CANCELLED},
    OrderStatus.PREPARING: {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.CANCELLED},
    OrderStatus.OUT_FOR_DELIVERY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

# Payment status that follows from reaching an order status
_PAYMENT_OUTCOMES = {
    OrderStatus.DELIVERED: PaymentStatus.PAID,
    OrderStatus.CANCELLED: PaymentStatus.FAILED,
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class DeliveryAddress:
    """Where the order goes, captured at checkout.

    Later edits to the user's saved addresses do not affect placed orders.
    """

    name = String(max_length=100)
    phone = String(max_length=20)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """Snapshot of a product at the moment it was ordered."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    image = String(max_length=1000)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_amount = Float(required=True, min_value=0.0)
    delivery_address = ValueObject(DeliveryAddress, required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.COD.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

    @invariant.post
    def total_must_match_line_items(self):
        expected = sum(item.line_total for item in self.items)
        if abs(expected - (self.total_amount or 0.0)) > _TOTAL_TOLERANCE:
            raise ValidationError({"total_amount": [f"Total {self.total_amount} does not match line items {expected}"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, items_data, delivery_address, payment_method=PaymentMethod.COD.value):
        """Place a new order.

        Args:
            user_id: The shopper placing the order.
            items_data: List of dicts with product_id, name, price, quantity
                        and image, already priced from the catalogue.
            delivery_address: Dict with street, city, state, postal_code and
                              optionally name and phone.
            payment_method: Only ``cod`` is accepted.
        """
        now = datetime.now(UTC)
        items = [
            OrderItem(
                product_id=item["product_id"],
                name=item["name"],
                price=item["price"],
                quantity=item["quantity"],
                image=item.get("image"),
            )
            for item in items_data
        ]
        order = cls(
            user_id=user_id,
            items=items,
            total_amount=sum(item.line_total for item in items),
            delivery_address=DeliveryAddress(**{k: v for k, v in delivery_address.items() if k in _ADDRESS_FIELDS}),
            payment_method=payment_method,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                item_count=sum(item.quantity for item in items),
                total_amount=order.total_amount,
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def transition_to(self, status):
        try:
            target = OrderStatus(status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{status}'"]}) from None

        self._assert_can_transition(target)
        previous = self.status
        now = datetime.now(UTC)

        with atomic_change(self):
            self.status = target.value
            if target in _PAYMENT_OUTCOMES:
                self.payment_status = _PAYMENT_OUTCOMES[target].value
            self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                from_status=previous,
                to_status=self.status,
                payment_status=self.payment_status,
                changed_at=now,
            )
        )

    def is_owned_by(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def to_payload(self) -> dict:
        address = self.delivery_address
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "items": [
                {
                    "product_id": str(item.product_id),
                    "name": item.name,
                    "price": item.price,
                    "quantity": item.quantity,
                    "image": item.image,
                }
                for item in self.items
            ],
            "total_amount": self.total_amount,
            "delivery_address": {
                "name": address.name,
                "phone": address.phone,
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "postal_code": address.postal_code,
            }
            if address
            else None,
            "status": self.status,
            "payment_method": self.payment_method,
            "payment_status": self.payment_status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
