"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CreateProductRequest,
    MessageResponse,
    ProductResponse,
    SeedResponse,
    UpdateProductRequest,
)
from catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from catalogue.product.product import Product
from catalogue.product.seed import SeedCatalogue
from shared.guard import require_admin
from shared.tokens import Principal

product_router = APIRouter(prefix="/api/products", tags=["products"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])
seed_router = APIRouter(prefix="/api/seed", tags=["seed"])


def _product_response(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse(**product.to_payload())


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category: str | None = None, search: str | None = None) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).active(category=category, search=search)
    return [ProductResponse(**p.to_payload()) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(product_id)


@product_router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = AddProduct(**body.model_dump())
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return _product_response(product_id)


@product_router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_product(product_id: str) -> MessageResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted successfully")


# --- Category endpoints ---


@category_router.get("", response_model=list[str])
async def list_categories() -> list[str]:
    return current_domain.repository_for(Product).categories()


# --- Seed endpoint ---


@seed_router.post("", response_model=SeedResponse)
async def seed_catalogue(principal: Principal = Depends(require_admin)) -> SeedResponse:
    count = current_domain.process(SeedCatalogue(requested_by=principal.user_id), asynchronous=False)
    return SeedResponse(message="Database seeded successfully", count=count)
