"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.schemas.common import ErrorResponse, FieldErrorItem, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    ProductDto,
    UpdateProductCommand,
)

__all__ = [
    "CreateProductCommand",
    "CurrentUser",
    "DeleteProductCommand",
    "ErrorResponse",
    "FieldErrorItem",
    "GetProductByIdQuery",
    "GetProductsQuery",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProductDto",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    "UpdateProductCommand",
]
