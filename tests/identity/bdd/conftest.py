"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when

from identity.auth.passwords import hash_password
from identity.auth.session import open_session
from identity.user.addresses import AddAddress
from identity.user.registration import RegisterUser
from identity.user.user import User
from shared.exceptions import AuthenticationError, ConflictError
from shared.tokens import decode_token


@pytest.fixture()
def outcome():
    """Holds whatever the last When step produced or raised."""
    return {"result": None, "exc": None}


def _register(email, password):
    return current_domain.process(
        RegisterUser(name="Asha Rao", email=email, password_hash=hash_password(password)),
        asynchronous=False,
    )


@given(
    parsers.cfparse('a shopper registered as "{email}" with password "{password}"'),
    target_fixture="user_id",
)
def registered_shopper(email, password):
    return _register(email, password)


@when(parsers.cfparse('someone registers as "{email}" with password "{password}"'))
def register_again(email, password, outcome):
    try:
        outcome["result"] = _register(email, password)
    except ConflictError as exc:
        outcome["exc"] = exc


@when(parsers.cfparse('the shopper signs in as "{email}" with password "{password}"'))
def sign_in(email, password, outcome):
    try:
        outcome["result"] = open_session(email, password)
    except AuthenticationError as exc:
        outcome["exc"] = exc


def _save_address(user_id, city, is_default):
    current_domain.process(
        AddAddress(user_id=user_id, street="12 MG Road", city=city, postal_code="560001", is_default=is_default),
        asynchronous=False,
    )


@when(parsers.cfparse('the shopper saves an address in "{city}"'))
def save_address(user_id, city):
    _save_address(user_id, city, is_default=False)


@when(parsers.cfparse('the shopper saves a default address in "{city}"'))
def save_default_address(user_id, city):
    _save_address(user_id, city, is_default=True)


@then("the registration is refused as a conflict")
def registration_refused(outcome):
    assert isinstance(outcome["exc"], ConflictError)
    assert outcome["exc"].status_code == 409


@then(parsers.cfparse('a session token is issued for a "{role}"'))
def token_issued(outcome, user_id, role):
    principal = decode_token(outcome["result"]["token"])
    assert principal.user_id == user_id
    assert principal.role == role
    assert outcome["result"]["user"]["email"] == "asha@example.com"


@then(parsers.cfparse('the sign-in is rejected with "{message}"'))
def sign_in_rejected(outcome, message):
    assert isinstance(outcome["exc"], AuthenticationError)
    assert outcome["exc"].message == message


@then(parsers.re(r"the shopper has (?P<count>\d+) address(es)?"))
def address_count(user_id, count):
    user = current_domain.repository_for(User).get(user_id)
    assert len(user.addresses) == int(count)


@then(parsers.cfparse('the default address is in "{city}"'))
def default_address_city(user_id, city):
    user = current_domain.repository_for(User).get(user_id)
    assert user.default_address.city == city
    assert sum(1 for a in user.addresses if a.is_default) == 1
