"""Unit tests for the testing helpers."""

from __future__ import annotations

import pytest

from mp_monitoring.monitoring import MonitoredCounter, MonitoredValue
from mp_monitoring.testing import Resettable, reset_counter


class TestResettable:
    def test_counter_is_resettable(self) -> None:
        assert isinstance(MonitoredCounter("c", ""), Resettable)

    def test_value_is_not_resettable(self) -> None:
        value = MonitoredValue("v", "", 3)
        assert not isinstance(value, Resettable)
        with pytest.raises(TypeError):
            reset_counter(value)  # type: ignore[arg-type]
