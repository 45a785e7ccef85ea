"""Testing support – hypothesis strategies for value objects and collections."""

from mp_value_objects.testing.generators import (
    collection_strategy,
    json_scalar_strategy,
    value_object_strategy,
)

__all__ = [
    "collection_strategy",
    "json_scalar_strategy",
    "value_object_strategy",
]
