"""Monitoring – Specification, the validated descriptor of a metric."""
from __future__ import annotations

import dataclasses
from typing import Any

import pint

from mp_monitoring.kernel.errors import SpecificationError
from mp_monitoring.monitoring.semantics import ValueSemantics, parse_semantics
from mp_monitoring.monitoring.units import parse_units, unit_format


@dataclasses.dataclass(frozen=True)
class Specification:
    """Immutable metadata of one metric.

    Build it from declarative input with :meth:`create`, which parses the
    semantics and unit strings.  The ``export_*`` fields place the metric in
    a structured export namespace: a top-level group, an attribute inside it,
    and an optional item of a composite attribute.

    ``optional`` only tells exporters whether a missing live value is
    acceptable; nothing here acts on it.
    """

    name: str
    optional: bool
    description: str
    unit: pint.Unit
    semantics: ValueSemantics
    export_name: str = ""
    export_attribute: str = ""
    export_composite_item: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise SpecificationError(self.name, self.name, kind="name", message="Metric name must not be empty")
        if not isinstance(self.semantics, ValueSemantics):
            raise SpecificationError(self.name, str(self.semantics), kind="semantics")
        if not isinstance(self.unit, pint.Unit):
            raise SpecificationError(self.name, str(self.unit), kind="units")

    @classmethod
    def create(
        cls,
        name: str,
        optional: bool,
        description: str,
        semantics: str,
        units: str,
        export_name: str = "",
        export_attribute: str = "",
        export_composite_item: str = "",
    ) -> Specification:
        """Parse *semantics* and *units* and build the descriptor.

        Units are parsed first, then semantics; the first failure raises
        :class:`SpecificationError` and no instance is created.
        """
        unit = parse_units(name, units)
        value_semantics = parse_semantics(name, semantics)
        return cls(
            name=name,
            optional=optional,
            description=description,
            unit=unit,
            semantics=value_semantics,
            export_name=export_name,
            export_attribute=export_attribute,
            export_composite_item=export_composite_item,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain view for exporters; the unit is rendered as text."""
        return {
            "name": self.name,
            "optional": self.optional,
            "description": self.description,
            "unit": unit_format().format(self.unit),
            "semantics": self.semantics.name,
            "export_name": self.export_name,
            "export_attribute": self.export_attribute,
            "export_composite_item": self.export_composite_item,
        }


__all__ = ["Specification"]
