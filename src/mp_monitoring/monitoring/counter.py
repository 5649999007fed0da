"""Monitoring – MonitoredCounter."""
from __future__ import annotations

import threading
import warnings

from mp_monitoring.monitoring.monitorable import AbstractMonitorable


class MonitoredCounter(AbstractMonitorable[int]):
    """Counter of events, such as messages sent or bytes written.

    Only increments are offered: consumers compute rates from successive
    readings and rely on the value never going down.  There is deliberately
    no ``decrement`` or ``set``; use
    :class:`~mp_monitoring.monitoring.value.MonitoredValue` for anything that
    can fall.

    Construction does not register the counter.  Use :meth:`create` or
    :meth:`register_self` to publish it in a registry.
    """

    def __init__(self, name: str, description: str) -> None:
        super().__init__(name, description, int)
        self._value = 0
        self._lock = threading.Lock()

    def get(self) -> int:
        return self._value

    def increment(self, delta: int = 1) -> None:
        """Add *delta* (default 1) and notify monitors."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise TypeError(f"Counter '{self.name}' takes integer increments, got {type(delta).__name__}")
        if delta < 0:
            raise ValueError(f"Counter '{self.name}' cannot be incremented by {delta}")
        with self._lock:
            self._value += delta
        self.notify_monitors()

    def reset(self) -> None:
        """Set the counter back to zero.

        .. deprecated::
            A counter should be continuous; what matters is its rate over
            time, not the total to date.  Tests should call
            :func:`mp_monitoring.testing.reset_counter` instead.
        """
        warnings.warn(
            "MonitoredCounter.reset() breaks the monotonic contract; use it in tests only",
            DeprecationWarning,
            stacklevel=2,
        )
        self._reset()

    def _reset(self) -> None:
        with self._lock:
            self._value = 0
        self.notify_monitors()


__all__ = ["MonitoredCounter"]
