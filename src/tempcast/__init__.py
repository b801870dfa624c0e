"""Scale-checked temperature quantities with exact conversions."""

from tempcast.conversion import CONVERSION_TABLE, ConversionRule, convert, lookup
from tempcast.errors import (
    ScaleMismatchError,
    TempcastError,
    ToleranceViolationError,
    UnsupportedConversionError,
)
from tempcast.literals import celsius, fahrenheit, kelvin
from tempcast.models import EPSILON, Celsius, Fahrenheit, Kelvin, Quantity, Scale, are_equal

__version__ = "0.1.0"

__all__ = [
    "CONVERSION_TABLE",
    "EPSILON",
    "Celsius",
    "ConversionRule",
    "Fahrenheit",
    "Kelvin",
    "Quantity",
    "Scale",
    "ScaleMismatchError",
    "TempcastError",
    "ToleranceViolationError",
    "UnsupportedConversionError",
    "are_equal",
    "celsius",
    "convert",
    "fahrenheit",
    "kelvin",
    "lookup",
]
