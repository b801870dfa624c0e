"""Typed conversion between quantity classes."""

from __future__ import annotations

import logging
from typing import TypeVar, overload

from tempcast.conversion.table import lookup
from tempcast.models.quantity import Celsius, Fahrenheit, Kelvin, Quantity

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=Quantity)


@overload
def convert(quantity: Celsius, target: type[Kelvin]) -> Kelvin: ...
@overload
def convert(quantity: Kelvin, target: type[Celsius]) -> Celsius: ...
@overload
def convert(quantity: Celsius, target: type[Fahrenheit]) -> Fahrenheit: ...
@overload
def convert(quantity: Fahrenheit, target: type[Celsius]) -> Celsius: ...
@overload
def convert(quantity: Fahrenheit, target: type[Kelvin]) -> Kelvin: ...
@overload
def convert(quantity: Kelvin, target: type[Fahrenheit]) -> Fahrenheit: ...


def convert(quantity: Quantity, target: type[Q]) -> Q:
    """Convert *quantity* to the scale of the *target* quantity class.

    The overloads enumerate the only valid pairs, so a type checker flags
    e.g. ``convert(celsius(1.0), Celsius)``; at runtime such a call raises
    :class:`~tempcast.errors.UnsupportedConversionError`.  The source
    quantity is never modified.
    """
    if not (isinstance(target, type) and issubclass(target, Quantity)) or target is Quantity:
        raise TypeError(f"Conversion target must be a concrete quantity class, got {target!r}")

    rule = lookup(quantity.scale, target.scale)
    result = target(rule.apply(quantity.value))
    logger.debug("Converted %s -> %s using %s", quantity, result, rule.formula)
    return result
