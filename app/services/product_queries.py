"""Read-only product queries and the entity-to-DTO mapping."""

from app.core.exceptions import NotFoundError
from app.models.product import Product
from app.repositories.products import ProductStore
from app.schemas.products import GetProductByIdQuery, GetProductsQuery, ProductDto


def to_product_dto(product: Product) -> ProductDto:
    """Copy a Product row field by field into its API shape."""
    return ProductDto(
        id=product.id,
        name=product.name,
        description=product.description or "",
        price=product.price,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


class GetProductByIdHandler:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    def handle(self, query: GetProductByIdQuery) -> ProductDto:
        """Raises NotFoundError when no product has the id."""
        product = self._products.find_by_id(query.id)
        if product is None:
            raise NotFoundError("Product", query.id)
        return to_product_dto(product)


class GetProductsHandler:
    def __init__(self, products: ProductStore) -> None:
        self._products = products

    def handle(self, query: GetProductsQuery) -> list[ProductDto]:
        """All products, newest first; empty list when the catalog is empty."""
        return [to_product_dto(p) for p in self._products.list_all()]
