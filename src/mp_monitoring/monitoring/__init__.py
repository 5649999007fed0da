"""Monitoring – metric specifications, live values and their registry."""
from mp_monitoring.monitoring.semantics import ValueSemantics, parse_semantics
from mp_monitoring.monitoring.units import UnitFormat, install_unit_aliases, parse_units, unit_format
from mp_monitoring.monitoring.specification import Specification
from mp_monitoring.monitoring.registry import (
    MonitorableRegistry,
    RegistryState,
    default_registry,
    get_monitorables,
    register,
    shutdown,
)
from mp_monitoring.monitoring.monitorable import AbstractMonitorable, Monitor, Monitorable, set_value_tracing
from mp_monitoring.monitoring.counter import MonitoredCounter
from mp_monitoring.monitoring.value import MonitoredValue
from mp_monitoring.monitoring.streams import CountingOutputStream
from mp_monitoring.monitoring.bootstrap import configure

__all__ = [
    "AbstractMonitorable",
    "CountingOutputStream",
    "Monitor",
    "Monitorable",
    "MonitorableRegistry",
    "MonitoredCounter",
    "MonitoredValue",
    "RegistryState",
    "Specification",
    "UnitFormat",
    "ValueSemantics",
    "configure",
    "default_registry",
    "get_monitorables",
    "install_unit_aliases",
    "parse_semantics",
    "parse_units",
    "register",
    "set_value_tracing",
    "shutdown",
    "unit_format",
]
