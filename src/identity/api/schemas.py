"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from identity.auth.passwords import MIN_PASSWORD_LENGTH

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Asha Rao",
                    "email": "asha@example.com",
                    "password": "s3cret-pass",
                    "phone": "9876543210",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)
    phone: str | None = Field(None, max_length=20)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "asha@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class UpdateProfileRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Asha R.", "phone": "9123456780"}]}}

    name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=20)


class AddAddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "street": "12 MG Road",
                    "city": "Bengaluru",
                    "state": "KA",
                    "postal_code": "560001",
                    "is_default": True,
                }
            ]
        }
    }

    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str = Field(..., max_length=20)
    is_default: bool = False


# --- Response Schemas ---


class UserSummary(BaseModel):
    id: str
    name: str
    email: str
    role: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserSummary


class AddressResponse(BaseModel):
    id: str
    street: str
    city: str
    state: str | None = None
    postal_code: str
    is_default: bool


class ProfileResponse(UserSummary):
    phone: str | None = None
    addresses: list[AddressResponse] = []
    created_at: str | None = None
