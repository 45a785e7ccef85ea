"""Observability – structured logging ports and helpers."""
from mp_value_objects.observability.logging.protocol import Logger
from mp_value_objects.observability.logging.factory import JsonLoggerFactory
from mp_value_objects.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
