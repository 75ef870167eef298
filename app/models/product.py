"""ORM model for catalog products."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from app.models.base import Base

NAME_MAX_LEN = 200
DESCRIPTION_MAX_LEN = 1000
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2


class Product(Base):
    """Catalog entry. updated_at stays None until the first update."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LEN), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LEN), nullable=False, default="")
    price = Column(Numeric(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)
