"""ValueObject base class — a mutable record compared by attribute values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from mp_value_objects.kernel.errors.domain import (
    SchemaError,
    TypeMismatchError,
    UnknownAttributeError,
)
from mp_value_objects.kernel.model.attribute import Attribute, AttributeSchema
from mp_value_objects.kernel.model.base import Composite
from mp_value_objects.kernel.model.error_set import Errors
from mp_value_objects.observability.logging import get_logger

V = TypeVar("V", bound="ValueObject")

logger = get_logger(__name__)


def _attribute_property(name: str) -> property:
    def fget(self: "ValueObject") -> Any:
        return self._values[name]

    def fset(self: "ValueObject", value: Any) -> None:
        self.set(name, value)

    return property(fget, fset, doc=f"The ``{name}`` attribute.")


class ValueObject(Composite):
    """Base class for value objects.

    Subclasses declare their attributes once, at class-definition time::

        class Address(ValueObject):
            schema = AttributeSchema.of("country", "zip", "city")
            rules = (PresenceRule("city"),)

    Each declared attribute gets a property, so ``address.city`` and
    ``address.get("city")`` are equivalent.  Two instances are equal when
    they have the same type and the same attribute values.  Instances are
    mutable and therefore unhashable.
    """

    schema: ClassVar[AttributeSchema] = AttributeSchema()
    rules: ClassVar[tuple[Any, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.schema, AttributeSchema):
            raise SchemaError(f"{cls.__name__}.schema must be an AttributeSchema")
        cls.rules = tuple(cls.rules)
        for attr in cls.schema:
            if hasattr(ValueObject, attr.name):
                raise SchemaError(f"Attribute '{attr.name}' on {cls.__name__} shadows a ValueObject member")
            if attr.type is not None and not (isinstance(attr.type, type) and issubclass(attr.type, Composite)):
                raise SchemaError(
                    f"Attribute '{attr.name}' on {cls.__name__} must be typed with a ValueObject or Collection"
                )
            if attr.type is not None and attr.default is not None:
                try:
                    attr.type.coerce(attr.default_value(), strict=True)
                except (TypeMismatchError, UnknownAttributeError) as exc:
                    raise SchemaError(
                        f"Default of attribute '{attr.name}' on {cls.__name__} is not a valid "
                        f"{attr.type.__name__}",
                        cause=exc,
                    ) from exc
            existing = cls.__dict__.get(attr.name)
            if existing is None or not isinstance(existing, property):
                setattr(cls, attr.name, _attribute_property(attr.name))

    def __init__(self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        data: dict[str, Any] = dict(attributes or {})
        data.update(kwargs)
        self._errors = Errors()
        self._values = self._build_values(data, strict=True)

    # Construction ------------------------------------------------------

    @classmethod
    def from_dict(cls: type[V], data: Mapping[str, Any], *, strict: bool = True) -> V:
        """Build an instance from a plain mapping, e.g. a decoded JSON object.

        With ``strict=False`` keys outside the schema are dropped instead of
        raising :class:`UnknownAttributeError`; nested attributes follow the
        same policy.
        """
        if not isinstance(data, Mapping):
            raise TypeMismatchError(f"mapping for {cls.__name__}", data)
        instance = cls.__new__(cls)
        instance._errors = Errors()
        instance._values = instance._build_values(dict(data), strict=strict)
        return instance

    @classmethod
    def coerce(cls: type[V], value: Any, *, strict: bool = True) -> V | None:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value, strict=strict)
        raise TypeMismatchError(cls.__name__, value)

    def _build_values(self, data: dict[str, Any], *, strict: bool) -> dict[str, Any]:
        schema = type(self).schema
        unknown = [key for key in data if key not in schema]
        if unknown:
            if strict:
                raise UnknownAttributeError(str(unknown[0]), type(self).__name__)
            logger.warning(
                "value_object.unknown_attributes_dropped",
                value_object=type(self).__name__,
                attributes=[str(key) for key in unknown],
            )
        values: dict[str, Any] = {}
        for attr in schema:
            if attr.name in data:
                values[attr.name] = self._convert(attr, data[attr.name], strict=strict)
            else:
                values[attr.name] = self._convert(attr, attr.default_value(), strict=True)
        return values

    @staticmethod
    def _convert(attr: Attribute, value: Any, *, strict: bool) -> Any:
        if attr.type is None:
            return value
        return attr.type.coerce(value, strict=strict)

    # Accessors ---------------------------------------------------------

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        return cls.schema.names

    def _attribute(self, name: str) -> Attribute:
        attr = type(self).schema.get(name)
        if attr is None:
            raise UnknownAttributeError(name, type(self).__name__)
        return attr

    def get(self, name: str) -> Any:
        self._attribute(name)
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        """Set one attribute; clears any previously computed errors."""
        attr = self._attribute(name)
        self._values[name] = self._convert(attr, value, strict=True)
        self._errors.clear()

    def to_dict(self) -> dict[str, Any]:
        """Every declared attribute in schema order, nested values included."""
        return {
            name: value.to_payload() if isinstance(value, Composite) else value
            for name, value in self._values.items()
        }

    def to_payload(self) -> dict[str, Any]:
        return self.to_dict()

    def copy_with(self: V, **changes: Any) -> V:
        """Return a new instance with given attributes replaced."""
        data = self.to_dict()
        data.update(changes)
        return type(self)(data)

    # Validation --------------------------------------------------------

    def is_valid(self) -> bool:
        """Run every rule in ``rules`` and rebuild :attr:`errors`."""
        self._errors.clear()
        for rule in type(self).rules:
            for attribute, message in rule.evaluate(self):
                self._errors.add(attribute, message)
        return not self._errors

    @property
    def errors(self) -> Errors:
        """Errors found by the last :meth:`is_valid` call."""
        return self._errors

    # Equality ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return type(self) is type(other) and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__name__}({body})"


__all__ = ["ValueObject"]
