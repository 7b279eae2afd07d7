"""Custom repository for order listings."""

from ordering.domain import ordering
from ordering.order.order import Order

# Upper bound on rows fetched per listing query
MAX_LISTING = 1000


@ordering.repository(part_of=Order)
class OrderRepository:
    def _newest_first(self, orders: list[Order]) -> list[Order]:
        return sorted(orders, key=lambda o: o.created_at.timestamp() if o.created_at else 0.0, reverse=True)

    def for_user(self, user_id) -> list[Order]:
        return self._newest_first(self._dao.query.filter(user_id=str(user_id)).limit(MAX_LISTING).all().items)

    def all_orders(self) -> list[Order]:
        return self._newest_first(self._dao.query.limit(MAX_LISTING).all().items)
