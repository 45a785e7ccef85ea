"""ValidDelegationRule — a record is invalid when a nested value is."""

from __future__ import annotations

from typing import Any

from mp_value_objects.kernel.model.base import Composite
from mp_value_objects.kernel.model.collection import INVALID_MESSAGE
from mp_value_objects.kernel.validation.rule import AttributeRule


class ValidDelegationRule(AttributeRule):
    """Validate nested value objects / collections held by *attributes*.

    A failing nested value adds a single ``"is invalid"`` message to the
    enclosing record under the attribute name.  The specific messages are
    only available from the nested object's own ``errors``.  ``None`` is
    skipped; combine with ``PresenceRule`` to require a value.

    Example::

        class Person(ValueObject):
            schema = AttributeSchema.of(
                "name",
                Attribute("addresses", type=Addresses),
            )
            rules = (ValidDelegationRule("addresses"),)
    """

    default_message = INVALID_MESSAGE

    def __init__(self, *attributes: str, message: str | None = None) -> None:
        super().__init__(*attributes, message=message, allow_none=True)

    def check(self, value: Any) -> str | None:
        if not isinstance(value, Composite):
            raise TypeError(
                f"ValidDelegationRule expects a ValueObject or Collection, got {type(value).__name__}"
            )
        return None if value.is_valid() else self.default_message


__all__ = ["ValidDelegationRule"]
