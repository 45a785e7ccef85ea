"""Attribute declarations and the ordered AttributeSchema."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Callable, Iterator
from typing import Any

from mp_value_objects.kernel.errors.domain import SchemaError


@dataclasses.dataclass(frozen=True, slots=True)
class Attribute:
    """A single named attribute of a value object.

    ``type`` is only set for composed attributes (a ``ValueObject`` or
    ``Collection`` subclass); raw mappings and lists assigned to such an
    attribute are converted into that type.
    """

    name: str
    default: Any = None
    default_factory: Callable[[], Any] | None = None
    type: type | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise SchemaError(f"Attribute name must be a valid identifier, got {self.name!r}")
        if self.default is not None and self.default_factory is not None:
            raise SchemaError(f"Attribute '{self.name}' cannot have both default and default_factory")

    def default_value(self) -> Any:
        """A fresh default; plain defaults are deep-copied per instance."""
        if self.default_factory is not None:
            return self.default_factory()
        return copy.deepcopy(self.default)


def _to_attribute(declaration: Any) -> Attribute:
    if isinstance(declaration, Attribute):
        return declaration
    if isinstance(declaration, str):
        return Attribute(declaration)
    if isinstance(declaration, tuple) and len(declaration) == 2:
        return Attribute(declaration[0], default=declaration[1])
    raise SchemaError(f"Cannot declare an attribute from {declaration!r}")


class AttributeSchema:
    """Immutable, ordered set of attribute declarations.

    Declaration order drives default construction, ``to_dict()`` output and
    JSON key order.

    Example::

        AttributeSchema.of("zip", "city", ("country", "JP"))
    """

    __slots__ = ("_attributes", "_index")

    def __init__(self, attributes: "tuple[Attribute, ...] | list[Attribute]" = ()) -> None:
        attrs = tuple(attributes)
        index: dict[str, Attribute] = {}
        for attr in attrs:
            if not isinstance(attr, Attribute):
                raise SchemaError(f"Expected Attribute, got {type(attr).__name__}")
            if attr.name in index:
                raise SchemaError(f"Duplicate attribute '{attr.name}'")
            index[attr.name] = attr
        self._attributes = attrs
        self._index = index

    @classmethod
    def of(cls, *declarations: Any) -> "AttributeSchema":
        """Build a schema from names, ``(name, default)`` pairs or ``Attribute``s."""
        return cls([_to_attribute(d) for d in declarations])

    def extend(self, *declarations: Any) -> "AttributeSchema":
        """Return a new schema with *declarations* appended after the current ones."""
        return AttributeSchema(self._attributes + tuple(_to_attribute(d) for d in declarations))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._index)

    def get(self, name: str) -> Attribute | None:
        return self._index.get(name)

    def defaults(self) -> dict[str, Any]:
        """Return a fresh ``name -> default`` dict in declaration order."""
        return {attr.name: attr.default_value() for attr in self._attributes}

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSchema):
            return NotImplemented
        return self._attributes == other._attributes

    def __hash__(self) -> int:
        return hash(self._attributes)

    def __repr__(self) -> str:  # pragma: no cover
        return f"AttributeSchema({', '.join(self.names)})"


__all__ = ["Attribute", "AttributeSchema"]
