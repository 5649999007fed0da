"""Testing support – registry isolation and counter reset.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_monitoring.testing.fixtures"]
"""

from mp_monitoring.testing.support import Resettable, reset_counter

__all__ = ["Resettable", "reset_counter"]
