from __future__ import annotations

from tempcast.models.config import AppSettings
from tempcast.models.quantity import (
    EPSILON,
    Celsius,
    Fahrenheit,
    Kelvin,
    Quantity,
    are_equal,
)
from tempcast.models.scale import Scale

__all__ = [
    # config
    "AppSettings",
    # quantity
    "EPSILON",
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "Quantity",
    "are_equal",
    # scale
    "Scale",
]
