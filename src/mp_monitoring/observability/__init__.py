"""Observability – structured logging for the monitoring runtime."""

from mp_monitoring.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
