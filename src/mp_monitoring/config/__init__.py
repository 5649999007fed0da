"""Config – environment-driven settings for the monitoring runtime."""

from mp_monitoring.config.settings import EnvSettingsLoader, MonitoringSettings, Settings, SettingsLoader
from mp_monitoring.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "MonitoringSettings",
    "Settings",
    "SettingsLoader",
]
