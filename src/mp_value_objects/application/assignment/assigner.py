"""NestedAssigner – bulk assignment from string-indexed input.

Form submissions arrive flattened (``addresses[0][city]=Tokyo``) and are
typically parsed into nested dicts whose collection keys are strings::

    {"name": "Ann", "addresses": {"1": {"city": "Osaka"}, "0": {"city": "Tokyo"}}}

Collection keys are ordered numerically.  The key ``"-1"`` is a dummy
entry: flattened encodings cannot express an empty collection, so forms
submit a ``-1`` row that is always discarded.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from operator import itemgetter
from typing import Any, Final, TypeVar

from mp_value_objects.kernel.errors import (
    InvalidIndexKeyError,
    TypeMismatchError,
    UnknownAttributeError,
)
from mp_value_objects.kernel.model import Collection, Composite, ValueObject
from mp_value_objects.observability.logging import get_logger

T = TypeVar("T", bound=Composite)

DUMMY_INDEX: Final = "-1"
_INDEX_KEY: Final = re.compile(r"[0-9]+")

logger = get_logger(__name__)


def parse_index_key(key: object) -> int:
    """Return the position encoded by *key* (``"3"`` or ``3``)."""
    if isinstance(key, bool):
        raise InvalidIndexKeyError(key)
    if isinstance(key, int):
        if key < 0:
            raise InvalidIndexKeyError(key)
        return key
    if isinstance(key, str) and _INDEX_KEY.fullmatch(key):
        return int(key)
    raise InvalidIndexKeyError(key)


def _is_dummy(key: object) -> bool:
    return key == DUMMY_INDEX or (isinstance(key, int) and not isinstance(key, bool) and key == -1)


class NestedAssigner:
    """Apply nested attribute mappings to value objects and collections.

    * Value object targets take ``{attribute: value}``; values for attributes
      declared with a ``type`` may be nested mappings (or index mappings for
      collections) and are assigned into the existing nested object, which
      is created when the slot is empty.
    * Collection targets take ``{index_key: {attribute: value}}`` (or a
      list).  Dummy ``"-1"`` entries are dropped, the rest sorted by numeric
      key.  Entry ``i`` updates element ``i`` in place or appends a new one,
      and elements past the last entry are removed, so the collection ends
      up with exactly one element per entry.

    Input is checked as a whole before anything changes: an unknown
    attribute or a bad index key anywhere leaves the target untouched.
    """

    def assign(self, target: T, data: Any) -> T:
        self._check(type(target), data)
        self._apply(target, data)
        return target

    def assign_attribute(self, record: ValueObject, name: str, data: Any) -> Any:
        """Assign *data* to the composite held in ``record.<name>``.

        Returns the (possibly newly created) nested value.
        """
        attr = type(record).schema.get(name)
        if attr is None:
            raise UnknownAttributeError(name, type(record).__name__)
        current = record.get(name)
        if current is None:
            if attr.type is None:
                raise TypeMismatchError(f"ValueObject or Collection in '{name}'", current)
            current = attr.type()
        elif not isinstance(current, Composite):
            raise TypeMismatchError(f"ValueObject or Collection in '{name}'", current)
        self._check(type(current), data)
        self._apply(current, data)
        record.set(name, current)
        return current

    # Structural check --------------------------------------------------

    def _check(self, target_type: type[Composite], data: Any) -> None:
        if issubclass(target_type, Collection):
            for entry in self._entries(data, log=False):
                self._check(target_type.element_type, entry)
            return
        if not isinstance(data, Mapping):
            raise TypeMismatchError(f"mapping for {target_type.__name__}", data)
        schema = target_type.schema  # type: ignore[attr-defined]
        for name, value in data.items():
            attr = schema.get(name)
            if attr is None:
                raise UnknownAttributeError(str(name), target_type.__name__)
            if self._is_nested_input(attr.type, value):
                self._check(attr.type, value)
            elif attr.type is not None and value is not None:
                attr.type.coerce(value)

    @staticmethod
    def _is_nested_input(attr_type: type | None, value: Any) -> bool:
        return attr_type is not None and value is not None and not isinstance(value, Composite)

    def _entries(self, data: Any, *, log: bool = True) -> list[Mapping[str, Any]]:
        if isinstance(data, Mapping):
            items = list(data.items())
        elif isinstance(data, (list, tuple)):
            items = [(index, entry) for index, entry in enumerate(data)]
        else:
            raise TypeMismatchError("index mapping or list", data)

        kept: list[tuple[int, Mapping[str, Any]]] = []
        seen: set[int] = set()
        for key, entry in items:
            if _is_dummy(key):
                if log:
                    logger.debug("assignment.dummy_entry_dropped")
                continue
            index = parse_index_key(key)
            if index in seen:
                raise InvalidIndexKeyError(key, "duplicates another index key")
            seen.add(index)
            if not isinstance(entry, Mapping):
                raise TypeMismatchError(f"attribute mapping at index {key!r}", entry)
            kept.append((index, entry))
        kept.sort(key=itemgetter(0))
        return [entry for _, entry in kept]

    # Mutation ----------------------------------------------------------

    def _apply(self, target: Composite, data: Any) -> None:
        if isinstance(target, Collection):
            self._apply_collection(target, data)
        else:
            self._apply_record(target, data)  # type: ignore[arg-type]

    def _apply_record(self, record: ValueObject, data: Mapping[str, Any]) -> None:
        schema = type(record).schema
        for name, value in data.items():
            attr = schema.get(name)
            if attr is not None and self._is_nested_input(attr.type, value):
                nested = record.get(name)
                if nested is None:
                    nested = attr.type()  # type: ignore[misc]
                self._apply(nested, value)
                record.set(name, nested)
            else:
                record.set(name, value)

    def _apply_collection(self, collection: Collection[Any], data: Any) -> None:
        entries = self._entries(data)
        element_type = type(collection).element_type
        collection.errors.clear()
        for position, entry in enumerate(entries):
            if position < len(collection):
                self._apply_record(collection[position], entry)
            else:
                element = element_type()
                self._apply_record(element, entry)
                collection.append(element)
        if len(collection) > len(entries):
            logger.debug(
                "assignment.collection_truncated",
                collection=type(collection).__name__,
                removed=len(collection) - len(entries),
            )
            del collection[len(entries):]


__all__ = ["DUMMY_INDEX", "NestedAssigner", "parse_index_key"]
