"""Application tests for placing orders against the live catalogue."""

import json

import pytest
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from ordering.order.status import UpdateOrderStatus
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _place(items, address, user_id="user-1", client_total=None):
    command = PlaceOrder(
        user_id=user_id,
        items=json.dumps(items),
        delivery_address=json.dumps(address),
        client_total=client_total,
    )
    return current_domain.process(command, asynchronous=False)


class TestPlaceOrder:
    def test_prices_come_from_catalogue(self, stock_product, address):
        tomatoes = stock_product(name="Fresh Tomatoes", price=40.0, image="t.jpg")
        paneer = stock_product(name="Paneer", price=100.0)

        order_id = _place(
            [
                {"product_id": tomatoes, "quantity": 2, "price": 1.0, "name": "Cheap Tomatoes"},
                {"product_id": paneer, "quantity": 1},
            ],
            address,
            client_total=3.0,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total_amount == 180.0
        by_product = {item.product_id: item for item in order.items}
        assert by_product[tomatoes].name == "Fresh Tomatoes"
        assert by_product[tomatoes].price == 40.0
        assert by_product[tomatoes].image == "t.jpg"
        assert order.delivery_address.name == "Asha Rao"

    def test_unknown_product_is_rejected(self, address):
        with pytest.raises(ValidationError) as exc:
            _place([{"product_id": "does-not-exist", "quantity": 1}], address)
        assert "items" in exc.value.messages

    def test_inactive_product_is_rejected(self, stock_product, address):
        retired = stock_product(name="Retired Snack", is_active=False)
        with pytest.raises(ValidationError) as exc:
            _place([{"product_id": retired, "quantity": 1}], address)
        assert "not available" in exc.value.messages["items"][0]

    def test_no_items_is_rejected(self, address):
        with pytest.raises(ValidationError):
            _place([], address)

    def test_nothing_persisted_on_rejection(self, stock_product, address):
        good = stock_product()
        with pytest.raises(ValidationError):
            _place([{"product_id": good, "quantity": 1}, {"product_id": "missing", "quantity": 1}], address)
        assert current_domain.repository_for(Order).for_user("user-1") == []

    def test_catalogue_changes_do_not_touch_placed_orders(self, stock_product, address, domains):
        from catalogue.product.product import Product

        product_id = stock_product(price=40.0)
        order_id = _place([{"product_id": product_id, "quantity": 1}], address)

        with domains["catalogue"].domain_context():
            repo = current_domain.repository_for(Product)
            product = repo.get(product_id)
            product.revise(price=55.0, name="Renamed")
            repo.add(product)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.items[0].price == 40.0
        assert order.items[0].name == "Fresh Tomatoes"


class TestOrderListing:
    def test_for_user_is_scoped_and_newest_first(self, stock_product, address):
        product_id = stock_product()
        first = _place([{"product_id": product_id, "quantity": 1}], address)
        second = _place([{"product_id": product_id, "quantity": 2}], address)
        _place([{"product_id": product_id, "quantity": 1}], address, user_id="user-2")

        orders = current_domain.repository_for(Order).for_user("user-1")
        assert {str(o.id) for o in orders} == {first, second}
        assert orders[0].created_at >= orders[1].created_at

    def test_all_orders(self, stock_product, address):
        product_id = stock_product()
        _place([{"product_id": product_id, "quantity": 1}], address)
        _place([{"product_id": product_id, "quantity": 1}], address, user_id="user-2")
        assert len(current_domain.repository_for(Order).all_orders()) == 2


class TestUpdateOrderStatus:
    def test_valid_transition_is_persisted(self, stock_product, address):
        order_id = _place([{"product_id": stock_product(), "quantity": 1}], address)
        status = current_domain.process(UpdateOrderStatus(order_id=order_id, status="confirmed"), asynchronous=False)
        assert status == "confirmed"
        assert current_domain.repository_for(Order).get(order_id).status == "confirmed"

    def test_invalid_transition_leaves_order_unchanged(self, stock_product, address):
        order_id = _place([{"product_id": stock_product(), "quantity": 1}], address)
        with pytest.raises(ValidationError):
            current_domain.process(UpdateOrderStatus(order_id=order_id, status="delivered"), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).status == "pending"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderStatus(order_id="missing", status="confirmed"), asynchronous=False)
