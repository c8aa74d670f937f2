"""Public API for errcode configuration utilities."""

from .loader import apply_settings, configure_errors, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ErrcodeSettings,
    ErrorsSettings,
    LoggingSettings,
    MappingYamlSettingsSource,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ErrcodeSettings",
    "ErrorsSettings",
    "LoggingSettings",
    "MappingYamlSettingsSource",
    "apply_settings",
    "configure_errors",
    "load_settings",
]
