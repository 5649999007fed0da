"""Testing support – Resettable capability."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Resettable(Protocol):
    """Monitorables whose value tests may put back to the initial state."""

    def _reset(self) -> None: ...


def reset_counter(monitorable: Resettable) -> None:
    """Zero *monitorable* without the production deprecation warning."""
    if not isinstance(monitorable, Resettable):
        raise TypeError(f"{type(monitorable).__name__} does not support reset")
    monitorable._reset()


__all__ = ["Resettable", "reset_counter"]
