"""Value-object data model — schema, records, collections, error sets."""

from mp_value_objects.kernel.model.attribute import Attribute, AttributeSchema
from mp_value_objects.kernel.model.base import Composite
from mp_value_objects.kernel.model.collection import INVALID_MESSAGE, Collection
from mp_value_objects.kernel.model.error_set import BASE, Errors
from mp_value_objects.kernel.model.value_object import ValueObject

__all__ = [
    "BASE",
    "INVALID_MESSAGE",
    "Attribute",
    "AttributeSchema",
    "Collection",
    "Composite",
    "Errors",
    "ValueObject",
]
