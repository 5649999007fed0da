"""Unit tests for MonitorableRegistry."""

from __future__ import annotations

import threading

import pytest

from mp_monitoring.kernel.errors import RegistrationConflictError
from mp_monitoring.monitoring import MonitorableRegistry, MonitoredCounter, MonitoredValue, RegistryState, registry


class TestLifecycle:
    def test_starts_uninitialized(self) -> None:
        assert MonitorableRegistry().state is RegistryState.UNINITIALIZED

    def test_register_activates(self) -> None:
        reg = MonitorableRegistry()
        reg.register(MonitoredCounter("c", ""))
        assert reg.state is RegistryState.ACTIVE

    def test_get_monitorables_activates(self) -> None:
        reg = MonitorableRegistry()
        assert reg.get_monitorables() == []
        assert reg.state is RegistryState.ACTIVE

    def test_shutdown_clears_and_uninitializes(self) -> None:
        reg = MonitorableRegistry()
        reg.register(MonitoredCounter("c", ""))
        reg.shutdown()
        assert reg.state is RegistryState.UNINITIALIZED
        assert len(reg) == 0
        assert reg.get_monitorables() == []

    def test_name_reusable_after_shutdown(self) -> None:
        reg = MonitorableRegistry()
        reg.register(MonitoredCounter("food", ""))
        reg.shutdown()
        replacement = MonitoredCounter("food", "")
        reg.register(replacement)
        assert reg.get("food") is replacement


class TestRegistration:
    def test_snapshot_in_registration_order(self) -> None:
        reg = MonitorableRegistry()
        a = MonitoredCounter("a", "")
        b = MonitoredValue("b", "", 1.5)
        reg.register(a)
        reg.register(b)
        assert reg.get_monitorables() == [a, b]
        assert "a" in reg
        assert "missing" not in reg
        assert reg.get("missing") is None

    def test_snapshot_is_detached(self) -> None:
        reg = MonitorableRegistry()
        snapshot = reg.get_monitorables()
        reg.register(MonitoredCounter("late", ""))
        assert snapshot == []

    def test_duplicate_name_rejected_first_kept(self) -> None:
        reg = MonitorableRegistry()
        first = MonitoredCounter("dup", "first")
        reg.register(first)
        with pytest.raises(RegistrationConflictError) as excinfo:
            reg.register(MonitoredCounter("dup", "second"))
        assert excinfo.value.metric_name == "dup"
        assert excinfo.value.code == "registration_conflict"
        assert reg.get("dup") is first
        assert len(reg) == 1

    def test_concurrent_registration(self) -> None:
        reg = MonitorableRegistry()
        errors: list[Exception] = []

        def work(start: int) -> None:
            for i in range(start, start + 100):
                try:
                    reg.register(MonitoredCounter(f"m{i}", ""))
                except RegistrationConflictError as exc:
                    errors.append(exc)
                reg.get_monitorables()

        threads = [threading.Thread(target=work, args=(n * 100,)) for n in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
        assert len(reg) == 2000

    def test_concurrent_duplicates_only_one_wins(self) -> None:
        reg = MonitorableRegistry()
        barrier = threading.Barrier(16)
        conflicts: list[RegistrationConflictError] = []

        def work() -> None:
            barrier.wait()
            try:
                reg.register(MonitoredCounter("contended", ""))
            except RegistrationConflictError as exc:
                conflicts.append(exc)

        threads = [threading.Thread(target=work) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(conflicts) == 15
        assert len(reg) == 1


class TestDefaultRegistry:
    def test_single_instance(self) -> None:
        assert registry.default_registry() is registry.default_registry()

    def test_module_functions_delegate(self) -> None:
        counter = MonitoredCounter("module.level", "")
        registry.register(counter)
        assert registry.get_monitorables() == [counter]
        registry.shutdown()
        assert registry.default_registry().state is RegistryState.UNINITIALIZED
        registry.register(MonitoredCounter("module.level", ""))

    def test_fixture_isolates(self, monitorable_registry: MonitorableRegistry) -> None:
        assert monitorable_registry is registry.default_registry()
        assert monitorable_registry.state is RegistryState.ACTIVE
        MonitoredCounter.create("fixture.counter", "")
        assert len(monitorable_registry) == 1
