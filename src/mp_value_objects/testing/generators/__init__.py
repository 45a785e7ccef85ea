"""Testing generators – property-based strategies."""
from mp_value_objects.testing.generators.strategies import (
    collection_strategy,
    json_scalar_strategy,
    value_object_strategy,
)

__all__ = [
    "collection_strategy",
    "json_scalar_strategy",
    "value_object_strategy",
]
