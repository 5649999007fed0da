"""
mp_monitoring – metric definition, live values and registry.

Import path convention::

    from mp_monitoring.monitoring import MonitoredCounter, Specification
    from mp_monitoring.monitoring.registry import get_monitorables, shutdown
    from mp_monitoring.kernel.errors import SpecificationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
