"""Config settings – Settings base class for environment-driven options."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, TypeVar

S = TypeVar("S", bound="Settings")


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclasses.dataclass
class Settings:
    """Typed options read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and declare fields with defaults; a field
    without a default is required and must be present in the environment.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``VALUE_OBJECTS_STRICT_DECODE``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls: type[S]) -> S:
        from mp_value_objects.config.settings.loaders import EnvSettingsLoader

        return EnvSettingsLoader().load(cls)

    def as_env(self) -> dict[str, str]:
        """Current values as environment variables that :meth:`from_env` reads back."""
        return {self.env_key(field.name): _render(getattr(self, field.name)) for field in dataclasses.fields(self)}

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
