"""JSON adapter – text encoding for value objects and collections."""
from mp_value_objects.adapters.json.codec import JsonCodec

__all__ = ["JsonCodec"]
