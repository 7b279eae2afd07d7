"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request schemas and the
domain's validation rules (well-formed email, password of at least six
characters, a delivery address with street, city and postal code).
"""

import random
import uuid

from faker import Faker

fake = Faker("en_IN")

PASSWORD = "loadtest-pass"

# ---------- Identity ----------


def valid_email() -> str:
    """Generate an email that is unique across concurrent simulated users."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def valid_phone() -> str:
    """Ten-digit mobile number."""
    return f"{random.randint(6, 9)}{random.randint(0, 999_999_999):09d}"


def registration_data() -> dict:
    """Generate a RegisterRequest payload."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": PASSWORD,
        "phone": valid_phone(),
    }


def address_data() -> dict:
    """Generate an AddAddressRequest payload."""
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "postal_code": fake.postcode()[:20],
    }


def delivery_address(name: str, phone: str) -> dict:
    """Delivery address as attached to an order, contact fields included."""
    return {"name": name, "phone": phone, **address_data()}


# ---------- Ordering ----------


def basket(products: list[dict], max_lines: int = 4) -> list[dict]:
    """Pick a few in-stock products and quantities, priced as the client sees them."""
    in_stock = [p for p in products if p.get("stock", 0) > 0] or products
    picked = random.sample(in_stock, k=min(len(in_stock), random.randint(1, max_lines)))
    return [
        {
            "product_id": p["id"],
            "name": p["name"],
            "price": p["price"],
            "quantity": random.randint(1, 3),
            "image": p.get("image"),
        }
        for p in picked
    ]


def order_data(items: list[dict], address: dict) -> dict:
    """Generate a PlaceOrderRequest payload with the client-side total."""
    return {
        "items": items,
        "delivery_address": address,
        "payment_method": "cod",
        "total_amount": round(sum(i["price"] * i["quantity"] for i in items), 2),
    }
