"""Monitoring – MonitorableRegistry, the directory of live metrics.

Exporters read :func:`get_monitorables`; test suites call :func:`shutdown`
between cases so no registration leaks from one test into the next.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import TYPE_CHECKING, Any

from mp_monitoring.kernel.errors import RegistrationConflictError
from mp_monitoring.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_monitoring.monitoring.monitorable import Monitorable

_log = get_logger(__name__)


class RegistryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class MonitorableRegistry:
    """Thread-safe mapping of metric name to :class:`Monitorable`.

    The registry becomes ``ACTIVE`` on the first :meth:`register` or
    :meth:`get_monitorables` call; :meth:`shutdown` empties it and returns it
    to ``UNINITIALIZED``.
    """

    def __init__(self) -> None:
        self._monitorables: dict[str, Monitorable[Any]] = {}
        self._state = RegistryState.UNINITIALIZED
        self._lock = threading.RLock()

    @property
    def state(self) -> RegistryState:
        return self._state

    def register(self, monitorable: Monitorable[Any]) -> None:
        """Add *monitorable* under its name.

        Raises
        ------
        RegistrationConflictError
            When the name is taken; the existing entry is left untouched.
        """
        name = monitorable.name
        with self._lock:
            if name in self._monitorables:
                _log.warning("registry.conflict", metric=name)
                raise RegistrationConflictError(name)
            self._monitorables[name] = monitorable
            self._state = RegistryState.ACTIVE
        _log.debug("registry.registered", metric=name)

    def get_monitorables(self) -> list[Monitorable[Any]]:
        """Snapshot of everything registered, in registration order."""
        with self._lock:
            self._state = RegistryState.ACTIVE
            return list(self._monitorables.values())

    def get(self, name: str) -> Monitorable[Any] | None:
        with self._lock:
            return self._monitorables.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._monitorables

    def __len__(self) -> int:
        with self._lock:
            return len(self._monitorables)

    def shutdown(self) -> None:
        """Forget every registration and go back to ``UNINITIALIZED``."""
        with self._lock:
            count = len(self._monitorables)
            self._monitorables.clear()
            self._state = RegistryState.UNINITIALIZED
        _log.debug("registry.shutdown", cleared=count)


_default_lock = threading.Lock()
_default: MonitorableRegistry | None = None


def default_registry() -> MonitorableRegistry:
    """The process-wide registry, created on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = MonitorableRegistry()
    return _default


def register(monitorable: Monitorable[Any]) -> None:
    default_registry().register(monitorable)


def get_monitorables() -> list[Monitorable[Any]]:
    return default_registry().get_monitorables()


def shutdown() -> None:
    default_registry().shutdown()


__all__ = [
    "MonitorableRegistry",
    "RegistryState",
    "default_registry",
    "get_monitorables",
    "register",
    "shutdown",
]
