"""Config settings – CodecSettings for the JSON storage codec."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_value_objects.config.settings.base import Settings


@dataclasses.dataclass
class CodecSettings(Settings):
    """How value objects are written to and read from text columns.

    Environment variables: ``VALUE_OBJECTS_STRICT_DECODE``,
    ``VALUE_OBJECTS_ENSURE_ASCII``.
    """

    _prefix: ClassVar[str] = "VALUE_OBJECTS"

    strict_decode: bool = True
    ensure_ascii: bool = False


__all__ = ["CodecSettings"]
