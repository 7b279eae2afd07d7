"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when

from ordering.order.order import Order

ADDRESS = {"street": "12 MG Road", "city": "Bengaluru", "postal_code": "560001"}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(
    parsers.cfparse(
        'a placed order for {qty1:d} x "{name1}" at {price1:g} and {qty2:d} x "{name2}" at {price2:g}'
    ),
    target_fixture="order",
)
def placed_order(qty1, name1, price1, qty2, name2, price2):
    return Order.place(
        user_id="user-1",
        items_data=[
            {"product_id": "p1", "name": name1, "price": float(price1), "quantity": qty1},
            {"product_id": "p2", "name": name2, "price": float(price2), "quantity": qty2},
        ],
        delivery_address=ADDRESS,
    )


@when(parsers.cfparse('the order moves to "{status}"'))
def move_order(order, status):
    order.transition_to(status)


@when(parsers.cfparse('the order tries to move to "{status}"'))
def try_move_order(order, status, error):
    try:
        order.transition_to(status)
    except ValidationError as exc:
        error["exc"] = exc


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse('the payment status is "{status}"'))
def payment_status_is(order, status):
    assert order.payment_status == status


@then(parsers.cfparse("the order total is {total:g}"))
def order_total_is(order, total):
    assert order.total_amount == total


@then("the transition is refused")
def transition_refused(error):
    assert isinstance(error["exc"], ValidationError)
    assert "status" in error["exc"].messages
