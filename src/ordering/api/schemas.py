"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class DeliveryAddressSchema(BaseModel):
    name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str = Field(..., max_length=20)


class RequestedItemSchema(BaseModel):
    """A cart line as the client sees it. Only product_id and quantity are trusted."""

    product_id: str
    quantity: int = Field(ge=1)
    name: str | None = None
    price: float | None = None
    image: str | None = None


class OrderItemSchema(BaseModel):
    product_id: str
    name: str
    price: float
    quantity: int
    image: str | None = None


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"product_id": "prod-001", "quantity": 2, "price": 40}],
                    "delivery_address": {
                        "name": "Asha Rao",
                        "phone": "9876543210",
                        "street": "12 MG Road",
                        "city": "Bengaluru",
                        "postal_code": "560001",
                    },
                    "payment_method": "cod",
                    "total_amount": 80,
                }
            ]
        }
    }

    items: list[RequestedItemSchema] = Field(..., min_length=1)
    delivery_address: DeliveryAddressSchema
    payment_method: str = "cod"
    total_amount: float | None = None


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "confirmed"}]}}

    status: str


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class OrderResponse(BaseModel):
    id: str
    user_id: str
    items: list[OrderItemSchema]
    total_amount: float
    delivery_address: DeliveryAddressSchema | None = None
    status: str
    payment_method: str
    payment_status: str
    created_at: str | None = None
    updated_at: str | None = None


class OwnerSchema(BaseModel):
    name: str
    email: str
    phone: str | None = None


class ExpandedOrderItemSchema(OrderItemSchema):
    product: dict | None = None


class ExpandedOrderResponse(OrderResponse):
    items: list[ExpandedOrderItemSchema]
    user: OwnerSchema | None = None
