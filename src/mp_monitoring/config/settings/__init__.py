"""Config settings – 12-factor env-based configuration."""
from mp_monitoring.config.settings.base import Settings
from mp_monitoring.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_monitoring.config.settings.monitoring import MonitoringSettings

__all__ = ["EnvSettingsLoader", "MonitoringSettings", "Settings", "SettingsLoader"]
