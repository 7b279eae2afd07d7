"""Application tests for product management, listing and seeding."""

from datetime import UTC, datetime, timedelta

import pytest
from catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from catalogue.product.product import Product
from catalogue.product.seed import DEMO_PRODUCTS, SeedCatalogue
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _add(**overrides):
    data = {"name": "Fresh Tomatoes", "price": 40, "category": "Vegetables & Fruits"}
    data.update(overrides)
    return current_domain.process(AddProduct(**data), asynchronous=False)


class TestAddProduct:
    def test_add_persists_product(self):
        product_id = _add(original_price=50, discount=20, unit="500g", stock=50)
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Fresh Tomatoes"
        assert product.unit == "500g"
        assert product.is_active is True

    def test_inconsistent_discount_is_rejected(self):
        with pytest.raises(ValidationError):
            _add(price=45, original_price=50, discount=20)


class TestUpdateProduct:
    def test_update_changes_only_given_fields(self):
        product_id = _add(stock=5, unit="1kg")
        current_domain.process(UpdateProduct(product_id=product_id, stock=25), asynchronous=False)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.stock == 25
        assert product.unit == "1kg"
        assert product.name == "Fresh Tomatoes"

    def test_deactivate(self):
        product_id = _add()
        current_domain.process(UpdateProduct(product_id=product_id, is_active=False), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).is_active is False

    def test_update_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateProduct(product_id="missing", stock=1), asynchronous=False)


class TestRemoveProduct:
    def test_remove_deletes_product(self):
        product_id = _add()
        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)


class TestProductListing:
    def _stock_shelves(self):
        repo = current_domain.repository_for(Product)
        base = datetime.now(UTC)
        for offset, (name, category, active) in enumerate(
            [
                ("Amul Milk", "Dairy & Breakfast", True),
                ("Fresh Apples", "Vegetables & Fruits", True),
                ("Milk Bikis", "Bakery & Biscuits", True),
                ("Old Milk Powder", "Dairy & Breakfast", False),
            ]
        ):
            product = Product.create(name=name, price=10, category=category, is_active=active)
            product.created_at = base + timedelta(minutes=offset)
            repo.add(product)

    def test_only_active_newest_first(self):
        self._stock_shelves()
        names = [p.name for p in current_domain.repository_for(Product).active()]
        assert names == ["Milk Bikis", "Fresh Apples", "Amul Milk"]

    def test_filter_by_category(self):
        self._stock_shelves()
        names = [p.name for p in current_domain.repository_for(Product).active(category="Dairy & Breakfast")]
        assert names == ["Amul Milk"]

    def test_search_is_case_insensitive_substring(self):
        self._stock_shelves()
        names = [p.name for p in current_domain.repository_for(Product).active(search="MILK")]
        assert names == ["Milk Bikis", "Amul Milk"]

    def test_category_and_search_combine(self):
        self._stock_shelves()
        names = [
            p.name for p in current_domain.repository_for(Product).active(category="Bakery & Biscuits", search="milk")
        ]
        assert names == ["Milk Bikis"]

    def test_categories_are_distinct_sorted_and_active_only(self):
        self._stock_shelves()
        _add(name="Paneer", category="Dairy & Breakfast")
        assert current_domain.repository_for(Product).categories() == [
            "Bakery & Biscuits",
            "Dairy & Breakfast",
            "Vegetables & Fruits",
        ]


class TestSeedCatalogue:
    def test_seed_replaces_catalogue(self):
        leftover = _add(name="Leftover", category="Misc")
        count = current_domain.process(SeedCatalogue(requested_by="admin-1"), asynchronous=False)

        assert count == len(DEMO_PRODUCTS) == 35
        repo = current_domain.repository_for(Product)
        assert len(repo.active()) == 35
        with pytest.raises(ObjectNotFoundError):
            repo.get(leftover)

    def test_demo_products_satisfy_discount_consistency(self):
        for data in DEMO_PRODUCTS:
            Product.create(**data)
