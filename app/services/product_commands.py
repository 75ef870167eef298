"""Product command handlers. Input rules live on the command schemas."""

import logging
from datetime import UTC, datetime

from app.models.product import Product
from app.repositories.products import ProductStore
from app.schemas.products import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)

logger = logging.getLogger(__name__)


class CreateProductHandler:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    def handle(self, command: CreateProductCommand) -> int:
        """Insert a new product and return its id."""
        product = Product(
            name=command.name,
            description=command.description,
            price=command.price,
            created_at=datetime.now(UTC),
        )
        product_id = self._products.add(product)
        logger.info("Product created", extra={"product_id": product_id})
        return product_id


class UpdateProductHandler:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    def handle(self, command: UpdateProductCommand) -> bool:
        """Overwrite name, description and price. False when the product does not exist."""
        product = self._products.find_by_id(command.id)
        if product is None:
            return False
        product.name = command.name
        product.description = command.description
        product.price = command.price
        product.updated_at = datetime.now(UTC)
        self._products.save(product)
        logger.info("Product updated", extra={"product_id": command.id})
        return True


class DeleteProductHandler:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    def handle(self, command: DeleteProductCommand) -> bool:
        product = self._products.find_by_id(command.id)
        if product is None:
            return False
        self._products.remove(product)
        logger.info("Product deleted", extra={"product_id": command.id})
        return True
