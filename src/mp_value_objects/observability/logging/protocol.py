"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """Minimal logger protocol – satisfied by structlog bound loggers."""

    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...
    def error(self, event: str, **kw: Any) -> Any: ...

    def bind(self, **new_values: Any) -> "Logger": ...


__all__ = ["Logger"]
