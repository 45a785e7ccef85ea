"""Config settings – 12-factor env-based configuration."""
from mp_value_objects.config.settings.base import Settings
from mp_value_objects.config.settings.codec import CodecSettings
from mp_value_objects.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CodecSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
