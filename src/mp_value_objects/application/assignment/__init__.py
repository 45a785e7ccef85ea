"""Nested attribute assignment from form-style indexed input."""
from mp_value_objects.application.assignment.assigner import (
    DUMMY_INDEX,
    NestedAssigner,
    parse_index_key,
)

__all__ = ["DUMMY_INDEX", "NestedAssigner", "parse_index_key"]
