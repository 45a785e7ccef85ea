"""Infrastructure errors — serialisation failures at the storage boundary."""

from __future__ import annotations

from typing import Any

from mp_value_objects.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Storage / I/O failure that is not a domain rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class DecodeError(SerializationError):
    """Stored text is not valid JSON or does not have the expected shape."""

    default_code = "decode_error"


__all__ = [
    "DecodeError",
    "InfrastructureError",
    "SerializationError",
]
