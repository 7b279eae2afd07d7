import pytest
from storefront.cart import CartState
from storefront.storage import LocalStore


@pytest.fixture()
def store(tmp_path):
    return LocalStore(tmp_path / "storefront.json")


@pytest.fixture()
def cart(store):
    return CartState(store)


def make_product(product_id, price, name=None):
    return {"id": product_id, "name": name or f"Product {product_id}", "price": price, "image": None, "unit": "1pc"}


@pytest.fixture()
def p1():
    return make_product("p1", 40, "Fresh Tomatoes")


@pytest.fixture()
def p2():
    return make_product("p2", 100, "Paneer")
