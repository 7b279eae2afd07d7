"""Checkout: turn the cart and a delivery address into a placed order.

Stages move forward only::

    editing → submitted → confirmed_display → browsing

The confirmation view returns to browsing on its own once
``CONFIRMATION_DELAY`` seconds have passed.
"""

import time
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from enum import Enum

import structlog

from storefront.cart import CartState
from storefront.client import ApiError, StorefrontClient, StorefrontUnavailable
from storefront.storage import ORDERS, LocalStore

logger = structlog.get_logger(__name__)

CONFIRMATION_DELAY = 3.0

EMPTY_CART_MESSAGE = "Your cart is empty!"
MISSING_ADDRESS_MESSAGE = "Please add your delivery address first."


class CheckoutStage(Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"
    CONFIRMED_DISPLAY = "confirmed_display"
    BROWSING = "browsing"


class CheckoutError(Exception):
    """A user-visible reason the checkout cannot go ahead."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def order_request(cart_items: list[dict], address: dict) -> dict:
    """Package cart lines and an address as a ``POST /api/orders`` body."""
    return {
        "items": [
            {
                "product_id": str(entry["id"]),
                "name": entry.get("name"),
                "price": entry.get("price"),
                "image": entry.get("image"),
                "quantity": entry["quantity"],
            }
            for entry in cart_items
        ],
        "delivery_address": address,
        "payment_method": "cod",
        "total_amount": sum(float(entry["price"]) * entry["quantity"] for entry in cart_items),
    }


def _local_order(request: dict, address: dict) -> dict:
    """An order the server has not accepted yet, carrying the request to resubmit."""
    return {
        "id": f"local-{uuid.uuid4()}",
        "items": request["items"],
        "total_amount": request["total_amount"],
        "delivery_address": address,
        "status": "pending",
        "payment_method": "cod",
        "payment_status": "pending",
        "created_at": datetime.now(UTC).isoformat(),
        "synced": False,
        "request": request,
    }


class CheckoutFlow:
    def __init__(
        self,
        cart: CartState,
        client: StorefrontClient,
        store: LocalStore,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cart = cart
        self.client = client
        self.store = store
        self.clock = clock
        self.stage = CheckoutStage.EDITING
        self.order: dict | None = None
        self._confirmed_at: float | None = None

    def submit(self, address: dict | None) -> dict:
        """Place the order. Returns the order as recorded in local history.

        Raises CheckoutError, leaving cart and stage untouched, when the cart
        is empty, no address is given, the shopper is not signed in ("Not
        signed in", or the server's 401 for an expired session), or the server
        rejects the order with any other 4xx.

        When the server is unreachable or answers with a 5xx, the order is
        kept locally unsynced for ``sync_pending_orders`` to resubmit.
        """
        if self.stage is not CheckoutStage.EDITING:
            raise CheckoutError("This checkout has already been submitted")
        if self.cart.is_empty:
            raise CheckoutError(EMPTY_CART_MESSAGE)
        if not address:
            raise CheckoutError(MISSING_ADDRESS_MESSAGE)

        request = order_request(self.cart.items, address)
        try:
            order = self.client.place_order(request)
            order["synced"] = True
        except StorefrontUnavailable:
            order = _local_order(request, address)
            logger.warning("Order kept locally until the server is reachable", local_id=order["id"])
        except ApiError as exc:
            if exc.is_client_error:
                raise CheckoutError(exc.detail) from exc
            order = _local_order(request, address)
            logger.warning(
                "Order kept locally after a server error", local_id=order["id"], status_code=exc.status_code
            )

        history = self.store.get(ORDERS) or []
        self.store.set(ORDERS, [order, *history])
        self.stage = CheckoutStage.SUBMITTED
        self.cart.clear()

        self.order = order
        self.stage = CheckoutStage.CONFIRMED_DISPLAY
        self._confirmed_at = self.clock()
        return order

    def poll(self) -> CheckoutStage:
        """Advance to browsing once the confirmation has been shown long enough."""
        if (
            self.stage is CheckoutStage.CONFIRMED_DISPLAY
            and self.clock() - self._confirmed_at >= CONFIRMATION_DELAY
        ):
            self.stage = CheckoutStage.BROWSING
        return self.stage


def sync_pending_orders(client: StorefrontClient, store: LocalStore) -> int:
    """Resubmit orders placed while offline. Returns how many were accepted.

    Orders the server rejects with a 4xx other than 401 are marked
    ``rejected`` and not retried. Syncing stops, leaving the remaining orders
    pending, at the first connection failure, 5xx, or missing/expired
    session.
    """
    history = store.get(ORDERS) or []
    accepted = 0
    updated = []
    halted = False

    for order in history:
        if order.get("synced") or order.get("rejected") or halted:
            updated.append(order)
            continue
        try:
            placed = client.place_order(order["request"])
        except StorefrontUnavailable:
            halted = True
            updated.append(order)
            continue
        except ApiError as exc:
            if exc.is_client_error and exc.status_code != 401:
                logger.warning("Server rejected an offline order", local_id=order["id"], detail=exc.detail)
                updated.append({**order, "rejected": True, "error": exc.detail})
            else:
                logger.warning("Pausing order sync", local_id=order["id"], status_code=exc.status_code)
                halted = True
                updated.append(order)
            continue
        accepted += 1
        updated.append({**placed, "synced": True})

    store.set(ORDERS, updated)
    return accepted
