"""Product persistence: find, add, save, remove and the ordered full listing."""

from sqlalchemy.orm import Session

from app.models.product import Product
from app.repositories.base import store_errors


class ProductStore:
    """Store over the products table. Listing returns a materialized list, newest first."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, product_id: int) -> Product | None:
        with store_errors(self._db, "find product by id"):
            return self._db.get(Product, product_id)

    def list_all(self) -> list[Product]:
        with store_errors(self._db, "list products"):
            return (
                self._db.query(Product)
                .order_by(Product.created_at.desc(), Product.id.desc())
                .all()
            )

    def add(self, product: Product) -> int:
        with store_errors(self._db, "add product"):
            self._db.add(product)
            self._db.commit()
            self._db.refresh(product)
            return product.id

    def save(self, product: Product) -> None:
        with store_errors(self._db, "save product"):
            self._db.add(product)
            self._db.commit()

    def remove(self, product: Product) -> None:
        with store_errors(self._db, "remove product"):
            self._db.delete(product)
            self._db.commit()
