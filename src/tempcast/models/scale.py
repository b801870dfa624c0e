from __future__ import annotations

from enum import StrEnum


class Scale(StrEnum):
    """The closed set of supported temperature scales."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Scale.CELSIUS: "°C",
    Scale.FAHRENHEIT: "°F",
    Scale.KELVIN: "K",
}
