"""Order placement: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, PaymentMethod
from ordering.order.pricing import price_line_items

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, price?}
    delivery_address = Text(required=True)  # JSON: address dict
    payment_method = String(max_length=20, default=PaymentMethod.COD.value)
    client_total = Float()


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        requested = json.loads(command.items) if isinstance(command.items, str) else command.items
        delivery_address = (
            json.loads(command.delivery_address)
            if isinstance(command.delivery_address, str)
            else command.delivery_address
        )

        items_data = price_line_items(requested)
        order = Order.place(
            user_id=command.user_id,
            items_data=items_data,
            delivery_address=delivery_address,
            payment_method=command.payment_method or PaymentMethod.COD.value,
        )

        if command.client_total is not None and abs(command.client_total - order.total_amount) > 0.01:
            logger.warning(
                "Client total differs from catalogue total",
                user_id=str(command.user_id),
                client_total=command.client_total,
                total_amount=order.total_amount,
            )

        current_domain.repository_for(Order).add(order)
        logger.info(
            "Placed order",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total_amount=order.total_amount,
        )
        return str(order.id)
