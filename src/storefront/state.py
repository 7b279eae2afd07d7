"""The storefront's application state, constructed explicitly and passed around."""

import os

from storefront.cart import CartState
from storefront.checkout import CheckoutFlow, sync_pending_orders
from storefront.client import StorefrontClient
from storefront.storage import ADDRESS, ORDERS, TOKEN, LocalStore


class StorefrontState:
    """Owns the local store, API client, cart, session token and saved address."""

    def __init__(self, storage_path: str | os.PathLike, client: StorefrontClient | None = None):
        self.store = LocalStore(storage_path)
        self.client = client or StorefrontClient()
        self.client.token = self.store.get(TOKEN)
        self.cart = CartState(self.store)

    # --- Session ---

    @property
    def signed_in(self) -> bool:
        return bool(self.client.token)

    def register(self, name, email, password, phone=None) -> dict:
        body = self.client.register(name, email, password, phone)
        self.store.set(TOKEN, body["token"])
        return body["user"]

    def login(self, email, password) -> dict:
        body = self.client.login(email, password)
        self.store.set(TOKEN, body["token"])
        return body["user"]

    def logout(self) -> None:
        self.client.token = None
        self.store.remove(TOKEN)

    # --- Address ---

    @property
    def address(self) -> dict | None:
        return self.store.get(ADDRESS)

    def save_address(self, address: dict) -> None:
        self.store.set(ADDRESS, dict(address))

    # --- Orders ---

    @property
    def order_history(self) -> list[dict]:
        return self.store.get(ORDERS) or []

    def begin_checkout(self, **kwargs) -> CheckoutFlow:
        return CheckoutFlow(self.cart, self.client, self.store, **kwargs)

    def checkout(self, **kwargs) -> CheckoutFlow:
        """Submit the cart with the saved address; returns the flow in its confirmation stage."""
        flow = self.begin_checkout(**kwargs)
        flow.submit(self.address)
        return flow

    def sync_pending_orders(self) -> int:
        return sync_pending_orders(self.client, self.store)

    def refresh_orders(self) -> list[dict]:
        """Replace the local history with the server's, keeping unsynced local orders first."""
        pending = [o for o in self.order_history if not o.get("synced")]
        server = [{**o, "synced": True} for o in self.client.orders()]
        self.store.set(ORDERS, pending + server)
        return self.order_history
