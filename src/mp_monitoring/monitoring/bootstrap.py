"""Monitoring – process start-up."""
from __future__ import annotations

from mp_monitoring.config import EnvSettingsLoader, MonitoringSettings
from mp_monitoring.monitoring.monitorable import set_value_tracing
from mp_monitoring.monitoring.units import install_unit_aliases
from mp_monitoring.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def configure(settings: MonitoringSettings | None = None) -> MonitoringSettings:
    """Prepare the monitoring runtime; call once at process start.

    Loads :class:`MonitoringSettings` from ``MP_MONITORING_*`` environment
    variables unless *settings* is given, configures structlog, installs the
    unit aliases and applies value tracing.  Repeated calls re-apply the
    settings and are otherwise harmless.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(MonitoringSettings)
    JsonLoggerFactory.configure(level=settings.level, json=settings.json_logs)
    install_unit_aliases()
    set_value_tracing(settings.trace_values)
    _log.info(
        "monitoring.configured",
        log_level=settings.log_level,
        trace_values=settings.trace_values,
    )
    return settings


__all__ = ["configure"]
