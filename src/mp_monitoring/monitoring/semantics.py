"""Monitoring – ValueSemantics and the semantics parser."""
from __future__ import annotations

from enum import Enum

from mp_monitoring.kernel.errors import SpecificationError


class ValueSemantics(str, Enum):
    """How a metric's value is expected to evolve over time."""

    CONSTANT = "constant"
    MONOTONICALLY_INCREASING = "monotonically_increasing"
    FREE_RUNNING = "free_running"


_ALIASES: dict[str, ValueSemantics] = {
    "constant": ValueSemantics.CONSTANT,
    "discrete": ValueSemantics.CONSTANT,
    "count": ValueSemantics.MONOTONICALLY_INCREASING,
    "counter": ValueSemantics.MONOTONICALLY_INCREASING,
    "gauge": ValueSemantics.FREE_RUNNING,
    "instant": ValueSemantics.FREE_RUNNING,
    "instantaneous": ValueSemantics.FREE_RUNNING,
}


def parse_semantics(name: str, semantics: str) -> ValueSemantics:
    """Map a declared semantics string onto :class:`ValueSemantics`.

    Matching is case-insensitive.  An empty string means ``FREE_RUNNING``.

    Raises
    ------
    SpecificationError
        When *semantics* is non-empty and matches no known alias.
    """
    if not semantics:
        return ValueSemantics.FREE_RUNNING
    try:
        return _ALIASES[semantics.lower()]
    except KeyError:
        raise SpecificationError(name, semantics, kind="semantics") from None


def semantics_aliases() -> dict[str, ValueSemantics]:
    """Copy of the alias table, for exporters that document accepted input."""
    return dict(_ALIASES)


__all__ = ["ValueSemantics", "parse_semantics", "semantics_aliases"]
