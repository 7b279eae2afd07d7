"""Custom repository for storefront product queries."""

from catalogue.domain import catalogue
from catalogue.product.product import Product

# Upper bound on rows fetched per listing query
MAX_LISTING = 1000


@catalogue.repository(part_of=Product)
class ProductRepository:
    def _newest_first(self, products: list[Product]) -> list[Product]:
        return sorted(products, key=lambda p: p.created_at.timestamp() if p.created_at else 0.0, reverse=True)

    def all_products(self) -> list[Product]:
        return self._newest_first(self._dao.query.limit(MAX_LISTING).all().items)

    def active(self, category: str | None = None, search: str | None = None) -> list[Product]:
        """Active products, optionally narrowed by exact category and a
        case-insensitive substring of the name. Newest first."""
        criteria = {"is_active": True}
        if category:
            criteria["category"] = category

        products = self._dao.query.filter(**criteria).limit(MAX_LISTING).all().items
        if search:
            needle = search.strip().lower()
            products = [p for p in products if needle in (p.name or "").lower()]
        return self._newest_first(products)

    def categories(self) -> list[str]:
        return sorted({p.category for p in self.active() if p.category})
