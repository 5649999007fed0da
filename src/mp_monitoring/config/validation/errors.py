"""Config validation errors raised while loading ``MonitoringSettings`` and friends."""
from mp_monitoring.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings for the monitoring runtime could not be loaded or built."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no ``<PREFIX>_<FIELD>`` environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable, e.g. an unknown ``log_level`` or a non-integer count."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
