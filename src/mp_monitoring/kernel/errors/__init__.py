"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                    (domain.py)
    │   ├── SpecificationError
    │   └── ConflictError
    │       └── RegistrationConflictError
    └── ApplicationError               (application.py)
"""

from mp_monitoring.kernel.errors.application import ApplicationError
from mp_monitoring.kernel.errors.base import BaseError
from mp_monitoring.kernel.errors.domain import (
    ConflictError,
    DomainError,
    RegistrationConflictError,
    SpecificationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "RegistrationConflictError",
    "SpecificationError",
]
