"""Product commands, queries and the ProductDto output shape."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer, field_validator
from pydantic_core import PydanticCustomError

from app.models.product import (
    DESCRIPTION_MAX_LEN,
    NAME_MAX_LEN,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)
from app.schemas.common import CamelModel, require_text

# Decimal travels as a JSON number, not pydantic's default string.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _ProductFields(CamelModel):
    """
    Fields shared by create and update. Defaults mirror an empty form and are
    validated too, so a missing name or price reports the same message as an
    empty one. Price must fit the Numeric(18, 2) column exactly.
    """

    name: str = Field(default="", max_length=NAME_MAX_LEN, validate_default=True)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LEN)
    price: Decimal = Field(
        default=Decimal("0"),
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validate_default=True,
    )

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return require_text(v, "Name is required.")

    @field_validator("price")
    @classmethod
    def price_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise PydanticCustomError("greater_than", "Price must be greater than 0.")
        return v


class CreateProductCommand(_ProductFields):
    pass


class UpdateProductCommand(_ProductFields):
    id: int = Field(default=0, validate_default=True)

    @field_validator("id")
    @classmethod
    def id_required(cls, v: int) -> int:
        if v == 0:
            raise PydanticCustomError("required", "Id must not be empty.")
        return v


class DeleteProductCommand(CamelModel):
    id: int


class GetProductByIdQuery(CamelModel):
    id: int


class GetProductsQuery(CamelModel):
    pass


class ProductDto(CamelModel):
    """Product as returned by the API."""

    id: int
    name: str
    description: str = ""
    price: JsonDecimal
    created_at: datetime
    updated_at: datetime | None = Field(default=None)
