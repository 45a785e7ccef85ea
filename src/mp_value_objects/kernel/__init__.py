"""Kernel – framework-agnostic value-object building blocks."""

from mp_value_objects.kernel.errors import (
    BaseError,
    DecodeError,
    DomainError,
    InfrastructureError,
    InvalidIndexKeyError,
    SchemaError,
    SerializationError,
    TypeMismatchError,
    UnknownAttributeError,
    ValidationError,
)
from mp_value_objects.kernel.model import (
    BASE,
    Attribute,
    AttributeSchema,
    Collection,
    Errors,
    ValueObject,
)
from mp_value_objects.kernel.validation import (
    FormatRule,
    InclusionRule,
    LambdaRule,
    LengthRule,
    PresenceRule,
    Rule,
    ValidDelegationRule,
)

__all__ = [
    "BASE",
    "Attribute",
    "AttributeSchema",
    "BaseError",
    "Collection",
    "DecodeError",
    "DomainError",
    "Errors",
    "FormatRule",
    "InclusionRule",
    "InfrastructureError",
    "InvalidIndexKeyError",
    "LambdaRule",
    "LengthRule",
    "PresenceRule",
    "Rule",
    "SchemaError",
    "SerializationError",
    "TypeMismatchError",
    "UnknownAttributeError",
    "ValidDelegationRule",
    "ValidationError",
    "ValueObject",
]
