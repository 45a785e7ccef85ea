"""SQLAlchemy column type storing a value object as JSON text."""
from __future__ import annotations

from typing import Any

from sqlalchemy.types import Text, TypeDecorator

from mp_value_objects.adapters.json import JsonCodec
from mp_value_objects.kernel.errors import TypeMismatchError
from mp_value_objects.kernel.model import Collection, ValueObject


class ValueObjectType(TypeDecorator[Any]):
    """Persist a ``ValueObject`` or ``Collection`` in a single text column.

    Usage::

        class Person(Base):
            __tablename__ = "people"
            id: Mapped[int] = mapped_column(primary_key=True)
            addresses: Mapped[Addresses | None] = mapped_column(ValueObjectType(Addresses))

    Mutating the loaded object in place is not tracked by the session;
    assign a new (or the same, re-set) value to mark the row dirty.
    """

    impl = Text
    cache_ok = True

    def __init__(self, target_type: type[Any], codec: JsonCodec | None = None, **kwargs: Any) -> None:
        if not (isinstance(target_type, type) and issubclass(target_type, (ValueObject, Collection))):
            raise TypeMismatchError("ValueObject or Collection class", target_type)
        super().__init__(**kwargs)
        self.target_type = target_type
        self.codec = codec or JsonCodec()

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:  # noqa: ARG002
        if value is not None and not isinstance(value, (ValueObject, Collection)):
            value = self.target_type.coerce(value)
        return self.codec.encode(value)

    def process_result_value(self, value: Any, dialect: Any) -> Any:  # noqa: ARG002
        return self.codec.decode(value, self.target_type)


__all__ = ["ValueObjectType"]
