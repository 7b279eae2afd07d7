"""HTTP client for the FreshCart API.

Any object with a requests-style ``request(method, url, **kwargs)`` method can
stand in for the session, which is how tests drive the API in-process.
"""

from __future__ import annotations

import os
from typing import Any

import requests
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "http://localhost:8000"


def extract_error_detail(response) -> str:
    """Extract a human-readable error message from an API error response.

    Handles pydantic validation errors (``{"detail": [...]}``) and domain
    errors (``{"error": "msg"}`` or ``{"error": {"field": [...]}}``).
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    if isinstance(body.get("detail"), list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {'; '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
                for field, msgs in error.items()
            )
        return str(error)

    return str(body)[:300]


class ApiError(Exception):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500


class StorefrontUnavailable(Exception):
    """The server could not be reached."""


class StorefrontClient:
    def __init__(self, base_url: str | None = None, session: Any = None, timeout: float = 10.0):
        self.base_url = (base_url or os.getenv("FRESHCART_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.token: str | None = None

    def _request(self, method: str, path: str, *, json: Any = None, params: dict | None = None, auth: bool = False):
        headers = {}
        if auth:
            if not self.token:
                raise ApiError(401, "Not signed in")
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("FreshCart API unreachable", method=method, path=path)
            raise StorefrontUnavailable(str(exc)) from exc

        if response.status_code >= 400:
            raise ApiError(response.status_code, extract_error_detail(response))
        return response.json()

    # --- Auth ---

    def register(self, name: str, email: str, password: str, phone: str | None = None) -> dict:
        body = self._request(
            "POST", "/api/auth/register", json={"name": name, "email": email, "password": password, "phone": phone}
        )
        self.token = body["token"]
        return body

    def login(self, email: str, password: str) -> dict:
        body = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = body["token"]
        return body

    def me(self) -> dict:
        return self._request("GET", "/api/auth/me", auth=True)

    # --- Profile ---

    def update_profile(self, name: str | None = None, phone: str | None = None) -> dict:
        return self._request("PUT", "/api/user/profile", json={"name": name, "phone": phone}, auth=True)

    def addresses(self) -> list[dict]:
        return self._request("GET", "/api/user/address", auth=True)

    def add_address(self, street: str, city: str, postal_code: str, state: str | None = None, is_default=False):
        return self._request(
            "POST",
            "/api/user/address",
            json={
                "street": street,
                "city": city,
                "state": state,
                "postal_code": postal_code,
                "is_default": is_default,
            },
            auth=True,
        )

    # --- Catalogue ---

    def products(self, category: str | None = None, search: str | None = None) -> list[dict]:
        params = {k: v for k, v in {"category": category, "search": search}.items() if v}
        return self._request("GET", "/api/products", params=params or None)

    def product(self, product_id: str) -> dict:
        return self._request("GET", f"/api/products/{product_id}")

    def categories(self) -> list[str]:
        return self._request("GET", "/api/categories")

    # --- Orders ---

    def place_order(self, order: dict) -> dict:
        return self._request("POST", "/api/orders", json=order, auth=True)

    def orders(self) -> list[dict]:
        return self._request("GET", "/api/orders", auth=True)

    def order(self, order_id: str) -> dict:
        return self._request("GET", f"/api/orders/{order_id}", auth=True)
