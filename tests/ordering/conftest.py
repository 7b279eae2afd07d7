import pytest


@pytest.fixture(autouse=True)
def _ctx(ordering_context):
    yield


@pytest.fixture()
def stock_product(domains):
    """Factory that adds a product to the catalogue and returns its id."""

    def _stock(name="Fresh Tomatoes", price=40.0, is_active=True, **extra):
        from catalogue.product.product import Product
        from protean import current_domain

        with domains["catalogue"].domain_context():
            product = Product.create(name=name, price=price, category="Groceries", is_active=is_active, **extra)
            current_domain.repository_for(Product).add(product)
            return str(product.id)

    return _stock


@pytest.fixture()
def address():
    return {"name": "Asha Rao", "phone": "9876543210", "street": "12 MG Road", "city": "Bengaluru", "postal_code": "560001"}
