"""JSON adapter – JsonCodec for storing value objects in text fields."""
from __future__ import annotations

import json
from typing import Any, TypeVar

from mp_value_objects.config.settings import CodecSettings
from mp_value_objects.kernel.errors import DecodeError, SerializationError, TypeMismatchError
from mp_value_objects.kernel.model import Collection, ValueObject
from mp_value_objects.observability.logging import get_logger

T = TypeVar("T", ValueObject, Collection)

logger = get_logger(__name__)


class JsonCodec:
    """Encode value objects / collections to JSON text and back.

    The encoded form is compact JSON with keys in schema order; absent
    attributes are ``null`` and an empty collection is ``[]``.  ``None``
    encodes to ``None`` so a nullable column stays ``NULL``.

    ``strict=True`` (default) rejects keys outside the schema with
    :class:`~mp_value_objects.kernel.errors.UnknownAttributeError`;
    ``strict=False`` drops them, which lets older rows load after an
    attribute was removed.
    """

    def __init__(self, *, strict: bool = True, ensure_ascii: bool = False) -> None:
        self.strict = strict
        self.ensure_ascii = ensure_ascii

    @classmethod
    def from_settings(cls, settings: CodecSettings) -> "JsonCodec":
        return cls(strict=settings.strict_decode, ensure_ascii=settings.ensure_ascii)

    def encode(self, value: ValueObject | Collection[Any] | None) -> str | None:
        if value is None:
            return None
        if not isinstance(value, (ValueObject, Collection)):
            raise TypeMismatchError("ValueObject or Collection", value)
        try:
            return json.dumps(
                value.to_payload(),
                ensure_ascii=self.ensure_ascii,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode {type(value).__name__}: {exc}",
                payload_type=type(value).__name__,
                cause=exc,
            ) from exc

    def decode(self, text: str | bytes | None, target_type: type[T]) -> T | None:
        if text is None or text in ("", b""):
            return None
        if not (isinstance(target_type, type) and issubclass(target_type, (ValueObject, Collection))):
            raise TypeMismatchError("ValueObject or Collection class", target_type)
        try:
            payload = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.warning("codec.decode_failed", target=target_type.__name__, error=str(exc))
            raise DecodeError(
                f"Malformed JSON for {target_type.__name__}: {exc}",
                payload_type=target_type.__name__,
                cause=exc,
            ) from exc
        if payload is None:
            return None
        try:
            return self._build(payload, target_type)
        except TypeMismatchError as exc:
            raise DecodeError(
                f"Unexpected shape for {target_type.__name__}: {exc.message}",
                payload_type=target_type.__name__,
                cause=exc,
            ) from exc

    def _build(self, payload: Any, target_type: type[T]) -> T:
        if issubclass(target_type, ValueObject):
            if not isinstance(payload, dict):
                raise DecodeError(
                    f"Expected a JSON object for {target_type.__name__}, got {type(payload).__name__}",
                    payload_type=target_type.__name__,
                )
            return target_type.from_dict(payload, strict=self.strict)
        if not isinstance(payload, list):
            raise DecodeError(
                f"Expected a JSON array for {target_type.__name__}, got {type(payload).__name__}",
                payload_type=target_type.__name__,
            )
        return target_type.from_list(payload, strict=self.strict)


__all__ = ["JsonCodec"]
