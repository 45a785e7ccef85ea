"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── SchemaError
    │   ├── UnknownAttributeError
    │   ├── TypeMismatchError
    │   ├── InvalidIndexKeyError
    │   └── ValidationError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
            └── DecodeError
"""

from mp_value_objects.kernel.errors.base import BaseError
from mp_value_objects.kernel.errors.domain import (
    DomainError,
    InvalidIndexKeyError,
    SchemaError,
    TypeMismatchError,
    UnknownAttributeError,
    ValidationError,
)
from mp_value_objects.kernel.errors.infrastructure import (
    DecodeError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "BaseError",
    "DecodeError",
    "DomainError",
    "InfrastructureError",
    "InvalidIndexKeyError",
    "SchemaError",
    "SerializationError",
    "TypeMismatchError",
    "UnknownAttributeError",
    "ValidationError",
]
