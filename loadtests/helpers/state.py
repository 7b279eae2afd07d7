"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State holds what earlier steps returned so that follow-up requests can
reference it.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a single simulated shopper from sign-up to checkout."""

    token: str | None = None
    name: str | None = None
    phone: str | None = None
    products: list[dict] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    cart: list[dict] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}


@dataclass
class DispatchState:
    """Tracks an admin working through the order queue."""

    token: str | None = None
    pending_order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
