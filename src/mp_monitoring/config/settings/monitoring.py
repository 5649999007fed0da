"""Config settings – MonitoringSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_monitoring.config.settings.base import Settings
from mp_monitoring.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MonitoringSettings(Settings):
    """Runtime switches for the monitoring core.

    ``trace_values`` logs every published value at debug level; leave it off
    in production since it runs on the instrumented thread.
    """

    _prefix: ClassVar[str] = "MP_MONITORING"

    log_level: str = "INFO"
    json_logs: bool = True
    trace_values: bool = False

    def _validate(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        self.log_level = self.log_level.upper()

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["MonitoringSettings"]
