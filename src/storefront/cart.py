"""Client-side shopping cart.

The cart is a list of product snapshots, each with a ``quantity`` of at least
one. Every mutation is written through to the local store immediately.
"""

from copy import deepcopy

from storefront.storage import CART, LocalStore


class CartState:
    def __init__(self, store: LocalStore):
        self._store = store
        self._items: list[dict] = []
        self.reload()

    def reload(self) -> None:
        """Restore the cart from the local store."""
        persisted = self._store.get(CART) or []
        self._items = [dict(entry) for entry in persisted if int(entry.get("quantity", 0)) >= 1]

    def _commit(self, items: list[dict]) -> None:
        """Persist ``items`` and adopt them; on a failed write the cart is unchanged."""
        self._store.set(CART, deepcopy(items))
        self._items = items

    def _index_of(self, product_id) -> int | None:
        for index, entry in enumerate(self._items):
            if str(entry["id"]) == str(product_id):
                return index
        return None

    @property
    def items(self) -> list[dict]:
        return deepcopy(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def add(self, product: dict) -> None:
        """Add one unit of ``product``, a catalogue payload with ``id`` and ``price``."""
        items = deepcopy(self._items)
        index = self._index_of(product["id"])
        if index is None:
            items.append({**product, "id": str(product["id"]), "quantity": 1})
        else:
            items[index]["quantity"] += 1
        self._commit(items)

    def update_quantity(self, product_id, delta: int) -> None:
        index = self._index_of(product_id)
        if index is None:
            return
        items = deepcopy(self._items)
        quantity = items[index]["quantity"] + delta
        if quantity <= 0:
            del items[index]
        else:
            items[index]["quantity"] = quantity
        self._commit(items)

    def remove(self, product_id) -> None:
        index = self._index_of(product_id)
        if index is not None:
            self._commit(self._items[:index] + self._items[index + 1 :])

    def total(self) -> float:
        return sum(float(entry["price"]) * entry["quantity"] for entry in self._items)

    def count(self) -> int:
        return sum(entry["quantity"] for entry in self._items)

    def clear(self) -> None:
        self._store.remove(CART)
        self._items = []
