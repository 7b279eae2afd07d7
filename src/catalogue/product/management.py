"""Admin product management: add, update and remove."""

import structlog
from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import DEFAULT_RATING, EDITABLE_FIELDS, Product

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True)
    original_price: Float()
    category: String(required=True, max_length=100)
    image: String(max_length=1000)
    stock: Integer(default=0)
    unit: String(max_length=50)
    discount: Integer(default=0)
    rating: Float(default=DEFAULT_RATING)
    is_active: Boolean(default=True)


@catalogue.command(part_of="Product")
class UpdateProduct:
    """Partial update: fields left unset keep their current value."""

    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float()
    original_price: Float()
    category: String(max_length=100)
    image: String(max_length=1000)
    stock: Integer()
    unit: String(max_length=50)
    discount: Integer()
    rating: Float()
    is_active: Boolean()


@catalogue.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            category=command.category,
            image=command.image,
            stock=command.stock,
            unit=command.unit,
            discount=command.discount,
            rating=command.rating,
            is_active=command.is_active,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Added product to catalogue", product_id=str(product.id), category=product.category)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {}
        for field in EDITABLE_FIELDS:
            value = getattr(command, field, None)
            if value is not None:
                changes[field] = value

        product.revise(**changes)
        repo.add(product)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("Removed product from catalogue", product_id=str(command.product_id))
