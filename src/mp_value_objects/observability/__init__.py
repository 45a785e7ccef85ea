"""Observability – structured logging."""

from mp_value_objects.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
