"""
mp_value_objects – value objects with validation, JSON storage and nested assignment.

Import path convention::

    from mp_value_objects.kernel import AttributeSchema, Collection, ValueObject
    from mp_value_objects.kernel.validation import PresenceRule, ValidDelegationRule
    from mp_value_objects.application.assignment import NestedAssigner
    from mp_value_objects.adapters.json import JsonCodec
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
