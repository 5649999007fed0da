"""Kernel – framework-agnostic building blocks."""

from mp_monitoring.kernel.errors import (
    ApplicationError,
    BaseError,
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
