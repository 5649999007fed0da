"""Domain errors — invalid metric definitions and registry conflicts."""

from __future__ import annotations

from typing import Any

from mp_monitoring.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule of the metric model is violated."""

    default_code = "domain_error"


class SpecificationError(DomainError):
    """A metric declaration carries semantics or units that cannot be parsed.

    ``metric_name`` is the metric being declared and ``token`` the offending
    input string.  ``detail["kind"]`` is ``"semantics"`` or ``"units"``.
    """

    default_code = "specification_error"

    def __init__(
        self,
        metric_name: str,
        token: str,
        *,
        kind: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"Unexpected {kind} [{token}] for {metric_name}"
        detail = {"metric": metric_name, "token": token, "kind": kind}
        super().__init__(message, detail=detail, **kwargs)
        self.metric_name = metric_name
        self.token = token
        self.kind = kind


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class RegistrationConflictError(ConflictError):
    """A monitorable is already registered under the requested name."""

    default_code = "registration_conflict"

    def __init__(self, metric_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Monitorable '{metric_name}' is already registered",
            detail={"metric": metric_name},
            **kwargs,
        )
        self.metric_name = metric_name


__all__ = [
    "ConflictError",
    "DomainError",
    "RegistrationConflictError",
    "SpecificationError",
]
