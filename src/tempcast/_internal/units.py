"""Raw temperature formulas shared across the codebase.

Each function is the direct affine transform for one ordered pair of
scales.  Nothing is rounded and nothing is chained through Celsius, so the
operand order below matters for round-trip reproducibility.
"""

from __future__ import annotations

ABSOLUTE_ZERO_CELSIUS = 273.15
ABSOLUTE_ZERO_FAHRENHEIT = 459.67


def celsius_to_kelvin(c: float) -> float:
    return c + ABSOLUTE_ZERO_CELSIUS


def kelvin_to_celsius(k: float) -> float:
    return k - ABSOLUTE_ZERO_CELSIUS


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit: ``(v * 9) / 5 + 32``."""
    return (c * 9) / 5 + 32


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius: ``(v - 32) * 5 / 9``."""
    return (f - 32) * 5 / 9


def fahrenheit_to_kelvin(f: float) -> float:
    """Convert Fahrenheit to Kelvin: ``(v + 459.67) * 5 / 9``."""
    return (f + ABSOLUTE_ZERO_FAHRENHEIT) * 5 / 9


def kelvin_to_fahrenheit(k: float) -> float:
    """Convert Kelvin to Fahrenheit: ``(v * 9) / 5 - 459.67``."""
    return (k * 9) / 5 - ABSOLUTE_ZERO_FAHRENHEIT
