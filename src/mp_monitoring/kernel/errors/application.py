"""Application-layer errors — cross-cutting concerns outside the metric model."""

from __future__ import annotations

from mp_monitoring.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (configuration, bootstrap)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
