"""Monitoring – MonitoredValue, a free-running gauge."""
from __future__ import annotations

import threading
from typing import Generic, TypeVar

from mp_monitoring.monitoring.monitorable import AbstractMonitorable

T = TypeVar("T")


class MonitoredValue(AbstractMonitorable[T], Generic[T]):
    """Holds an arbitrary current value that may rise or fall.

    The value type is taken from *initial_value* and enforced on :meth:`set`,
    so the initial value cannot be ``None``.
    """

    def __init__(self, name: str, description: str, initial_value: T) -> None:
        if initial_value is None:
            raise TypeError(f"MonitoredValue '{name}' needs a non-None initial value to fix its type")
        super().__init__(name, description, type(initial_value))
        self._value = initial_value
        self._lock = threading.Lock()

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if not isinstance(value, self.value_type):
            raise TypeError(
                f"MonitoredValue '{self.name}' holds {self.value_type.__name__}, got {type(value).__name__}"
            )
        with self._lock:
            self._value = value
        self.notify_monitors()


__all__ = ["MonitoredValue"]
