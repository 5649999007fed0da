"""Monitoring – Monitorable contract, Monitor subscribers and shared base.

Monitors run synchronously on the thread that changed the value, right
after the change.  They sit on the instrumented hot path and must not block.
"""
from __future__ import annotations

import abc
import threading
from typing import Any, Callable, Generic, TypeVar, Union

from mp_monitoring.monitoring import registry as _registry
from mp_monitoring.observability.logging import get_logger

T = TypeVar("T")
M = TypeVar("M", bound="AbstractMonitorable[Any]")

_log = get_logger(__name__)
_trace_values = False


def set_value_tracing(enabled: bool) -> None:
    """Log every published value at debug level when *enabled*."""
    global _trace_values
    _trace_values = bool(enabled)


def value_tracing_enabled() -> bool:
    return _trace_values


class Monitorable(abc.ABC, Generic[T]):
    """A live, named metric value that announces its changes."""

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @property
    @abc.abstractmethod
    def description(self) -> str: ...

    @property
    @abc.abstractmethod
    def value_type(self) -> type: ...

    @abc.abstractmethod
    def get(self) -> T: ...

    @abc.abstractmethod
    def attach_monitor(self, monitor: MonitorLike) -> None: ...

    @abc.abstractmethod
    def remove_monitor(self, monitor: MonitorLike) -> None: ...


class Monitor(abc.ABC):
    """Subscriber told about every change of the monitorables it watches."""

    @abc.abstractmethod
    def value_changed(self, monitorable: Monitorable[Any]) -> None: ...


MonitorLike = Union[Monitor, Callable[[Monitorable[Any]], None]]


class AbstractMonitorable(Monitorable[T]):
    """Name, description and monitor bookkeeping shared by concrete values.

    Monitors live in a tuple replaced on every attach/remove, so
    :meth:`notify_monitors` iterates a stable snapshot without locking.
    """

    def __init__(self, name: str, description: str, value_type: type) -> None:
        if not name:
            raise ValueError("Monitorable name must not be empty")
        self._name = name
        self._description = description
        self._value_type = value_type
        self._monitors: tuple[MonitorLike, ...] = ()
        self._monitors_lock = threading.Lock()

    @classmethod
    def create(
        cls: type[M],
        name: str,
        description: str,
        *args: Any,
        registry: _registry.MonitorableRegistry | None = None,
        **kwargs: Any,
    ) -> M:
        """Construct and register in one step (the usual production path)."""
        return cls(name, description, *args, **kwargs).register_self(registry)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def value_type(self) -> type:
        return self._value_type

    def register_self(self: M, registry: _registry.MonitorableRegistry | None = None) -> M:
        """Register into *registry* (default: the process-wide one)."""
        target = registry if registry is not None else _registry.default_registry()
        target.register(self)
        return self

    def attach_monitor(self, monitor: MonitorLike) -> None:
        with self._monitors_lock:
            if monitor not in self._monitors:
                self._monitors = self._monitors + (monitor,)

    def remove_monitor(self, monitor: MonitorLike) -> None:
        with self._monitors_lock:
            self._monitors = tuple(m for m in self._monitors if m != monitor)

    @property
    def monitors(self) -> tuple[MonitorLike, ...]:
        return self._monitors

    def notify_monitors(self) -> None:
        if _trace_values:
            self.log_value()
        for monitor in self._monitors:
            if isinstance(monitor, Monitor):
                monitor.value_changed(self)
            else:
                monitor(self)

    def log_value(self) -> None:
        _log.debug("monitorable.value", metric=self._name, value=self.get())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self.get()!r})"


__all__ = [
    "AbstractMonitorable",
    "Monitor",
    "MonitorLike",
    "Monitorable",
    "set_value_tracing",
    "value_tracing_enabled",
]
