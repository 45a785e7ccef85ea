"""Composite — behaviour shared by value objects and collections."""

from __future__ import annotations

import abc
from typing import Any

from mp_value_objects.kernel.errors.domain import ValidationError
from mp_value_objects.kernel.model.error_set import Errors


class Composite(abc.ABC):
    """Something that validates itself and converts to a JSON-ready payload.

    ``ValueObject`` and ``Collection`` are the two concrete kinds; an
    attribute declared with ``type=`` holds one of them.
    """

    @classmethod
    @abc.abstractmethod
    def coerce(cls, value: Any, *, strict: bool = True) -> Any:
        """Return *value* as an instance of ``cls`` (``None`` stays ``None``)."""

    @abc.abstractmethod
    def to_payload(self) -> Any:
        """Plain ``dict`` / ``list`` representation, nested composites included."""

    @abc.abstractmethod
    def is_valid(self) -> bool: ...

    @property
    @abc.abstractmethod
    def errors(self) -> Errors: ...

    def validate(self) -> None:
        """Raise ``ValidationError`` unless :meth:`is_valid` holds."""
        if not self.is_valid():
            raise ValidationError(
                f"{type(self).__name__} is invalid",
                errors=self._error_entries(),
            )

    def _error_entries(self) -> list[dict[str, Any]]:
        return self.errors.to_list()


__all__ = ["Composite"]
