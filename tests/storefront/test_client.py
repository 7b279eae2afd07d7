"""Tests for the HTTP client's error handling."""

import pytest
import requests
from storefront.client import ApiError, StorefrontClient, StorefrontUnavailable, extract_error_detail


class StubResponse:
    def __init__(self, status_code, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


class TestExtractErrorDetail:
    def test_plain_error(self):
        assert extract_error_detail(StubResponse(409, {"error": "Email already registered"})) == "Email already registered"

    def test_field_errors(self):
        body = {"error": {"status": ["Cannot transition from pending to delivered"]}}
        assert extract_error_detail(StubResponse(400, body)) == "status: Cannot transition from pending to delivered"

    def test_schema_errors(self):
        body = {"detail": [{"loc": ["body", "password"], "msg": "too short"}]}
        assert extract_error_detail(StubResponse(422, body)) == "body.password: too short"

    def test_non_json_body(self):
        assert extract_error_detail(StubResponse(502, text="Bad Gateway")) == "Bad Gateway"


class TestStorefrontClient:
    def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("FRESHCART_API_URL", "http://shop.internal:9000/")
        client = StorefrontClient(session=StubSession())
        assert client.base_url == "http://shop.internal:9000"

    def test_error_status_raises_api_error(self):
        client = StorefrontClient("http://api", session=StubSession(StubResponse(404, {"error": "User not found"})))
        with pytest.raises(ApiError) as exc:
            client.login("ghost@example.com", "x")
        assert exc.value.status_code == 404
        assert exc.value.detail == "User not found"
        assert exc.value.is_client_error

    def test_connection_failure_raises_unavailable(self):
        client = StorefrontClient("http://api", session=StubSession(error=requests.ConnectionError("refused")))
        with pytest.raises(StorefrontUnavailable):
            client.products()

    def test_authenticated_call_without_token(self):
        session = StubSession(StubResponse(200, []))
        with pytest.raises(ApiError) as exc:
            StorefrontClient("http://api", session=session).orders()
        assert exc.value.status_code == 401
        assert session.calls == []

    def test_bearer_header_is_sent(self):
        session = StubSession(StubResponse(200, []))
        client = StorefrontClient("http://api", session=session)
        client.token = "tok"
        client.orders()
        method, url, kwargs = session.calls[0]
        assert (method, url) == ("GET", "http://api/api/orders")
        assert kwargs["headers"] == {"Authorization": "Bearer tok"}
