"""SQLAlchemy adapter – column type for value objects."""
from mp_value_objects.adapters.sqlalchemy.types import ValueObjectType

__all__ = ["ValueObjectType"]
