"""Collection — an ordered, owned sequence of one value-object type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from mp_value_objects.kernel.errors.domain import SchemaError, TypeMismatchError
from mp_value_objects.kernel.model.base import Composite
from mp_value_objects.kernel.model.error_set import BASE, Errors
from mp_value_objects.kernel.model.value_object import ValueObject

E = TypeVar("E", bound=ValueObject)
C = TypeVar("C", bound="Collection[Any]")

INVALID_MESSAGE = "is invalid"


class Collection(Composite, Generic[E]):
    """Ordered list of value objects of a single ``element_type``.

    Declare one by subclassing::

        class Addresses(Collection[Address]):
            element_type = Address

    or with the shortcut ``Addresses = Collection.of(Address)``.

    A collection is valid when every element is valid.  When it is not, its
    own :attr:`errors` holds one generic ``"is invalid"`` entry under
    :data:`BASE`; the specific messages stay on each element.
    """

    element_type: ClassVar[type[ValueObject]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        element_type = cls.__dict__.get("element_type")
        if element_type is not None and not (
            isinstance(element_type, type) and issubclass(element_type, ValueObject)
        ):
            raise SchemaError(f"{cls.__name__}.element_type must be a ValueObject subclass")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._check_declared()
        self._errors = Errors()
        self._items: list[E] = [self._element(item, strict=True) for item in items]

    @classmethod
    def of(cls, element_type: type[E]) -> type["Collection[E]"]:
        """Create a collection class for *element_type*."""
        return type(cls)(
            f"{element_type.__name__}Collection",
            (cls,),
            {"element_type": element_type, "__module__": element_type.__module__},
        )

    @classmethod
    def _check_declared(cls) -> None:
        if getattr(cls, "element_type", None) is None:
            raise SchemaError(f"{cls.__name__} does not declare an element_type")

    # Construction ------------------------------------------------------

    @classmethod
    def from_list(cls: type[C], items: Iterable[Any], *, strict: bool = True) -> C:
        """Build a collection from instances and/or plain mappings."""
        if isinstance(items, (str, bytes, Mapping)):
            raise TypeMismatchError(f"list for {cls.__name__}", items)
        instance = cls()
        instance._items = [instance._element(item, strict=strict) for item in items]
        return instance

    @classmethod
    def coerce(cls: type[C], value: Any, *, strict: bool = True) -> C | None:
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, Collection):
            if value.element_type is cls.element_type:
                return cls(value)
            raise TypeMismatchError(cls.__name__, value)
        if isinstance(value, (list, tuple)):
            return cls.from_list(value, strict=strict)
        raise TypeMismatchError(cls.__name__, value)

    def _element(self, item: Any, *, strict: bool) -> E:
        element_type = type(self).element_type
        if isinstance(item, element_type):
            return item  # type: ignore[return-value]
        if isinstance(item, Mapping):
            return element_type.from_dict(item, strict=strict)  # type: ignore[return-value]
        raise TypeMismatchError(element_type.__name__, item)

    # Sequence protocol -------------------------------------------------

    def append(self, item: E | Mapping[str, Any]) -> None:
        self._items.append(self._element(item, strict=True))
        self._errors.clear()

    def extend(self, items: Iterable[E | Mapping[str, Any]]) -> None:
        converted = [self._element(item, strict=True) for item in items]
        self._items.extend(converted)
        self._errors.clear()

    def get(self, index: int) -> E:
        return self._items[index]

    def set(self, index: int, item: E | Mapping[str, Any]) -> None:
        self._items[index] = self._element(item, strict=True)
        self._errors.clear()

    def size(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> E:
        return self._items[index]

    def __setitem__(self, index: int, item: E | Mapping[str, Any]) -> None:
        self.set(index, item)

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]
        self._errors.clear()

    def clear(self) -> None:
        self._items.clear()
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def to_list(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self._items]

    def to_payload(self) -> list[dict[str, Any]]:
        return self.to_list()

    # Validation --------------------------------------------------------

    def is_valid(self) -> bool:
        """``True`` when every element is valid; an empty collection is valid.

        Every element is checked so that each one's own errors are current.
        """
        self._errors.clear()
        results = [item.is_valid() for item in self._items]
        if not all(results):
            self._errors.add(BASE, INVALID_MESSAGE)
        return not self._errors

    @property
    def errors(self) -> Errors:
        return self._errors

    def _error_entries(self) -> list[dict[str, Any]]:
        return [
            {"index": index, **entry}
            for index, item in enumerate(self._items)
            for entry in item.errors.to_list()
        ]

    # Equality ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.element_type is other.element_type and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


__all__ = ["INVALID_MESSAGE", "Collection"]
