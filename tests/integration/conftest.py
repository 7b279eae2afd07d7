import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from app import app

    return TestClient(app)


@pytest.fixture()
def admin_headers(domains):
    """Bearer headers for an admin created the way ``manage.py create-admin`` does."""
    from identity.auth.passwords import hash_password
    from identity.user.registration import RegisterUser
    from shared.tokens import issue_token

    identity = domains["identity"]
    with identity.domain_context():
        user_id = identity.process(
            RegisterUser(
                name="Ops Admin",
                email="ops@freshcart.test",
                password_hash=hash_password("admin-pass"),
                role="admin",
            ),
            asynchronous=False,
        )
    return {"Authorization": f"Bearer {issue_token(user_id, 'admin')}"}


def _register(client, email="asha@example.com", name="Asha Rao", password="s3cret-pass"):
    response = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    body = response.json()
    return body, {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture()
def register(client):
    return lambda **kwargs: _register(client, **kwargs)


@pytest.fixture()
def shopper_headers(register):
    _, headers = register()
    return headers


@pytest.fixture()
def product(client, admin_headers):
    """Factory creating a product through the admin API."""

    def _create(**overrides):
        data = {"name": "Fresh Tomatoes", "price": 40, "category": "Vegetables & Fruits", "unit": "500g"}
        data.update(overrides)
        response = client.post("/api/products", json=data, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
