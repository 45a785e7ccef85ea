"""Config validation errors."""
from mp_value_objects.config.validation.errors import ConfigError, MissingRequiredSettingError

__all__ = ["ConfigError", "MissingRequiredSettingError"]
