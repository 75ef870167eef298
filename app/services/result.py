"""Success/failure outcome for operations whose failures are expected, not exceptional."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    succeeded: bool
    value: T | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(succeeded=True, value=value)

    @classmethod
    def failure(cls, *errors: str) -> "Result[T]":
        return cls(succeeded=False, errors=tuple(errors))
