"""Shared schema base, model validation gate and the JSON error envelope."""

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.exceptions import ValidationError, field_errors

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Serializes to camelCase on the wire; accepts either casing on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def validate_model(model: type[ModelT], data: Any) -> ModelT:
    """Run the model's rules on data; every failing field is reported in one ValidationError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from None


def require_text(value: str, message: str) -> str:
    """Reject empty or whitespace-only strings with the given message."""
    if not value or not value.strip():
        raise PydanticCustomError("required", message)
    return value


class FieldErrorItem(CamelModel):
    """One itemized validation failure."""

    property_name: str
    error_message: str


class ErrorResponse(CamelModel):
    """Error envelope returned for every handled failure."""

    status: Literal["Error", "ValidationError", "ApplicationError", "NotFound"]
    message: str
    errors: list[FieldErrorItem] | None = Field(
        default=None,
        description="Present only for validation failures",
    )


class MessageResponse(BaseModel):
    """Plain {message} body used by the auth endpoints."""

    message: str
