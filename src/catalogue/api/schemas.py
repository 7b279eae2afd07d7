"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Fresh Tomatoes",
                    "description": "Fresh red tomatoes, locally sourced",
                    "price": 40,
                    "original_price": 50,
                    "category": "Vegetables & Fruits",
                    "image": "https://images.example.com/tomatoes.jpg",
                    "stock": 50,
                    "unit": "500g",
                    "discount": 20,
                    "rating": 4.2,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float
    original_price: float | None = None
    category: str = Field(..., max_length=100)
    image: str | None = Field(None, max_length=1000)
    stock: int = 0
    unit: str | None = Field(None, max_length=50)
    discount: int = 0
    rating: float = 4.0
    is_active: bool = True


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 36, "discount": 28, "stock": 20}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = None
    original_price: float | None = None
    category: str | None = Field(None, max_length=100)
    image: str | None = Field(None, max_length=1000)
    stock: int | None = None
    unit: str | None = Field(None, max_length=50)
    discount: int | None = None
    rating: float | None = None
    is_active: bool | None = None


# --- Response Schemas ---


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    original_price: float | None = None
    category: str
    image: str | None = None
    stock: int
    unit: str | None = None
    discount: int
    rating: float
    is_active: bool
    created_at: str | None = None


class MessageResponse(BaseModel):
    message: str


class SeedResponse(MessageResponse):
    count: int
