"""Testing fixtures – monitorable_registry."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from mp_monitoring.monitoring.registry import MonitorableRegistry, default_registry


@pytest.fixture
def monitorable_registry() -> Iterator[MonitorableRegistry]:
    """The process-wide registry, emptied again after the test."""
    registry = default_registry()
    registry.get_monitorables()
    yield registry
    registry.shutdown()


__all__ = ["monitorable_registry"]
