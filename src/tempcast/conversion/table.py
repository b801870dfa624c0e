"""The fixed table of direct conversions between temperature scales.

Only six ordered pairs exist.  Same-scale pairs are deliberately missing:
asking for one is a programming error, reported as
:class:`~tempcast.errors.UnsupportedConversionError`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from types import MappingProxyType

from tempcast._internal import units
from tempcast.errors import UnsupportedConversionError
from tempcast.models.scale import Scale


@dataclasses.dataclass(frozen=True)
class ConversionRule:
    """One direct conversion: ``target = func(source)``."""

    source: Scale
    target: Scale
    formula: str
    func: Callable[[float], float] = dataclasses.field(repr=False)

    def apply(self, value: float) -> float:
        return self.func(value)


def _rules(*rules: ConversionRule) -> Mapping[tuple[Scale, Scale], ConversionRule]:
    return MappingProxyType({(r.source, r.target): r for r in rules})


CONVERSION_TABLE: Mapping[tuple[Scale, Scale], ConversionRule] = _rules(
    ConversionRule(Scale.CELSIUS, Scale.KELVIN, "v + 273.15", units.celsius_to_kelvin),
    ConversionRule(Scale.KELVIN, Scale.CELSIUS, "v - 273.15", units.kelvin_to_celsius),
    ConversionRule(
        Scale.CELSIUS, Scale.FAHRENHEIT, "(v * 9) / 5 + 32", units.celsius_to_fahrenheit
    ),
    ConversionRule(
        Scale.FAHRENHEIT, Scale.CELSIUS, "(v - 32) * 5 / 9", units.fahrenheit_to_celsius
    ),
    ConversionRule(
        Scale.FAHRENHEIT, Scale.KELVIN, "(v + 459.67) * 5 / 9", units.fahrenheit_to_kelvin
    ),
    ConversionRule(
        Scale.KELVIN, Scale.FAHRENHEIT, "(v * 9) / 5 - 459.67", units.kelvin_to_fahrenheit
    ),
)


def lookup(source: Scale, target: Scale) -> ConversionRule:
    """Return the rule converting *source* to *target*.

    Raises :class:`UnsupportedConversionError` for pairs outside the table.
    """
    try:
        return CONVERSION_TABLE[(source, target)]
    except KeyError:
        raise UnsupportedConversionError(
            f"No conversion from {source.value} to {target.value}",
            source=source,
            target=target,
        ) from None
