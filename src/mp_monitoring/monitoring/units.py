"""Monitoring – unit parsing on top of :mod:`pint`.

All metrics share one :class:`pint.UnitRegistry`, wrapped by a process-wide
:class:`UnitFormat` that also knows two labels used by metric declarations:
``"milliseconds"`` and ``"bytes"``.  :func:`install_unit_aliases` installs
them exactly once; call it at process start (``configure()`` does) or let
:func:`parse_units` call it lazily.
"""
from __future__ import annotations

import threading

import pint

from mp_monitoring.kernel.errors import SpecificationError
from mp_monitoring.observability.logging import get_logger

_log = get_logger(__name__)


class UnitFormat:
    """Parse unit expressions, consulting registered alias labels first."""

    def __init__(self, registry: pint.UnitRegistry | None = None) -> None:
        self._registry = registry if registry is not None else pint.UnitRegistry()
        self._aliases: dict[str, pint.Unit] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> pint.UnitRegistry:
        return self._registry

    def alias(self, unit: pint.Unit | str, label: str) -> None:
        """Make *label* parse to *unit*."""
        if isinstance(unit, str):
            unit = self._registry.parse_units(unit)
        with self._lock:
            self._aliases[label] = unit

    def aliases(self) -> dict[str, pint.Unit]:
        with self._lock:
            return dict(self._aliases)

    def parse(self, text: str) -> pint.Unit:
        """Return the unit for *text*; an empty string is dimensionless.

        Raises whatever the pint parser raises for malformed expressions.
        """
        text = text.strip()
        unit = self._aliases.get(text)
        if unit is not None:
            return unit
        return self._registry.parse_units(text)

    def format(self, unit: pint.Unit) -> str:
        """Render *unit*, preferring a registered alias label."""
        with self._lock:
            for label, aliased in self._aliases.items():
                if aliased == unit:
                    return label
        return str(unit)


_lock = threading.Lock()
_format: UnitFormat | None = None
_aliases_installed = False


def unit_format() -> UnitFormat:
    """The process-wide :class:`UnitFormat`, created on first use."""
    global _format
    if _format is None:
        with _lock:
            if _format is None:
                _format = UnitFormat()
    return _format


def install_unit_aliases() -> UnitFormat:
    """Register the ``milliseconds`` and ``bytes`` aliases (idempotent)."""
    global _aliases_installed
    fmt = unit_format()
    if _aliases_installed:
        return fmt
    with _lock:
        if not _aliases_installed:
            registry = fmt.registry
            fmt.alias(registry.millisecond, "milliseconds")
            fmt.alias(registry.byte, "bytes")
            _aliases_installed = True
            _log.debug("unit_aliases.installed", aliases=["milliseconds", "bytes"])
    return fmt


def parse_units(name: str, units: str) -> pint.Unit:
    """Parse the declared *units* of metric *name*.

    Raises
    ------
    SpecificationError
        When the unit expression cannot be parsed; the pint error is chained.
    """
    fmt = install_unit_aliases()
    try:
        return fmt.parse(units)
    except Exception as exc:  # noqa: BLE001 – pint raises several unrelated types
        raise SpecificationError(
            name,
            units,
            kind="units",
            message=f"Unexpected units [{units}] for {name}",
            cause=exc,
        ) from exc


__all__ = ["UnitFormat", "install_unit_aliases", "parse_units", "unit_format"]
