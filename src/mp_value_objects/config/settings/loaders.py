"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from mp_value_objects.config.settings.base import Settings
from mp_value_objects.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables."""

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        try:
            if type_hint is bool or type_hint == "bool":
                lowered = value.strip().lower()
                if lowered not in _TRUTHY + _FALSY:
                    raise ValueError(f"not a boolean: {value!r}")
                return lowered in _TRUTHY
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise ConfigError(f"Setting '{key}' has invalid value {value!r}", cause=exc) from exc
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
