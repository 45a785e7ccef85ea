"""Config – env-based settings for codecs and adapters."""

from mp_value_objects.config.settings import CodecSettings, EnvSettingsLoader, Settings, SettingsLoader
from mp_value_objects.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "CodecSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
