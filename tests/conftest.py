"""Shared fixtures: every test starts from an empty process-wide registry."""

from __future__ import annotations

import pytest

from mp_monitoring.monitoring import registry, set_value_tracing
from mp_monitoring.testing.fixtures import monitorable_registry  # noqa: F401


@pytest.fixture(autouse=True)
def _isolated_registry():
    yield
    registry.shutdown()
    set_value_tracing(False)
