"""Domain errors — schema, attribute and validation failures."""

from __future__ import annotations

from typing import Any

from mp_value_objects.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value-object rule is broken by the caller."""

    default_code = "domain_error"


class SchemaError(DomainError):
    """An attribute schema declaration is malformed."""

    default_code = "schema_error"


class UnknownAttributeError(DomainError):
    """Construction or assignment referenced a name outside the schema."""

    default_code = "unknown_attribute"

    def __init__(self, attribute: str, owner: str, **kwargs: Any) -> None:
        super().__init__(
            f"unknown attribute '{attribute}' for {owner}",
            detail={"attribute": attribute, "owner": owner},
            **kwargs,
        )
        self.attribute = attribute
        self.owner = owner


class TypeMismatchError(DomainError):
    """A value cannot be turned into the declared value-object type."""

    default_code = "type_mismatch"

    def __init__(self, expected: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"expected {expected}, got {type(value).__name__}",
            detail={"expected": expected, "actual": type(value).__name__},
            **kwargs,
        )
        self.expected = expected
        self.value = value


class InvalidIndexKeyError(DomainError):
    """A collection index key is not a non-negative integer (or is repeated)."""

    default_code = "invalid_index_key"

    def __init__(self, key: object, reason: str = "must be a non-negative integer", **kwargs: Any) -> None:
        super().__init__(f"index key {key!r} {reason}", detail={"key": str(key)}, **kwargs)
        self.key = key
        self.reason = reason


class ValidationError(DomainError):
    """A value object or collection failed its validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = [
    "DomainError",
    "InvalidIndexKeyError",
    "SchemaError",
    "TypeMismatchError",
    "UnknownAttributeError",
    "ValidationError",
]
