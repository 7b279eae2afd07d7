"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from identity.api.schemas import (
    AddAddressRequest,
    AddressResponse,
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
)
from identity.auth.passwords import hash_password
from identity.auth.session import open_session
from identity.user.addresses import AddAddress
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser
from identity.user.user import User
from shared.guard import require_principal
from shared.tokens import Principal, issue_token

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
user_router = APIRouter(prefix="/api/user", tags=["user"])


def _load_user(principal: Principal) -> User:
    return current_domain.repository_for(User).get(principal.user_id)


@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        phone=body.phone,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return AuthResponse(
        message="User registered successfully",
        token=issue_token(user.id, user.role),
        user=user.summary(),
    )


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    session = open_session(body.email, body.password)
    return AuthResponse(message="Login successful", **session)


@auth_router.get("/me", response_model=ProfileResponse)
async def me(principal: Principal = Depends(require_principal)) -> ProfileResponse:
    return ProfileResponse(**_load_user(principal).profile())


@user_router.get("/profile", response_model=ProfileResponse)
async def get_profile(principal: Principal = Depends(require_principal)) -> ProfileResponse:
    return ProfileResponse(**_load_user(principal).profile())


@user_router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    body: UpdateProfileRequest,
    principal: Principal = Depends(require_principal),
) -> ProfileResponse:
    command = UpdateProfile(
        user_id=principal.user_id,
        name=body.name,
        phone=body.phone,
    )
    profile = current_domain.process(command, asynchronous=False)
    return ProfileResponse(**profile)


@user_router.get("/address", response_model=list[AddressResponse])
async def list_addresses(principal: Principal = Depends(require_principal)) -> list[AddressResponse]:
    user = _load_user(principal)
    return [AddressResponse(**a.snapshot()) for a in user.addresses]


@user_router.post("/address", status_code=201, response_model=list[AddressResponse])
async def add_address(
    body: AddAddressRequest,
    principal: Principal = Depends(require_principal),
) -> list[AddressResponse]:
    command = AddAddress(
        user_id=principal.user_id,
        street=body.street,
        city=body.city,
        state=body.state,
        postal_code=body.postal_code,
        is_default=body.is_default,
    )
    addresses = current_domain.process(command, asynchronous=False)
    return [AddressResponse(**a) for a in addresses]
