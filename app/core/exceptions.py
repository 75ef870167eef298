"""Application exceptions translated to HTTP responses by app.api.errors."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """One failed validation rule for one input property."""

    property_name: str
    error_message: str


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """
    Flatten pydantic error dicts (``ValidationError.errors()`` or FastAPI's
    ``RequestValidationError.errors()``) into FieldErrors. The property is the
    last element of each error's location, ignoring the ``body`` prefix.
    """
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        result.append(
            FieldError(
                property_name=loc[-1] if loc else "body",
                error_message=err.get("msg", "Invalid value"),
            )
        )
    return result


class NotFoundError(Exception):
    """Raised when a lookup by key finds no entity."""

    def __init__(self, entity_name: str, key: object) -> None:
        self.entity_name = entity_name
        self.key = key
        self.message = f'Entity "{entity_name}" ({key}) was not found.'
        super().__init__(self.message)


class ValidationError(Exception):
    """Raised before any mutation when one or more input rules fail; carries every failure."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        self.message = "One or more validation errors occurred."
        super().__init__(self.message)

    def properties(self) -> set[str]:
        return {e.property_name for e in self.errors}


class ApplicationError(Exception):
    """Domain rule violation surfaced to the client as a message (HTTP 400)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StoreError(Exception):
    """Raised when persistence fails (connectivity, constraint violation, timeout)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
