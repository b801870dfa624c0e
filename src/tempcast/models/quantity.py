"""Scale-tagged temperature quantities.

Every concrete quantity class is bound to exactly one :class:`Scale`.  The
comparison and arithmetic operators accept only ``Self``, so a type checker
rejects ``Celsius(1.0) + Kelvin(1.0)``; at runtime the same mix raises
:class:`~tempcast.errors.ScaleMismatchError` instead of producing a number in
the wrong units.
"""

from __future__ import annotations

import dataclasses
from numbers import Real
from typing import ClassVar, Self

from tempcast.errors import ScaleMismatchError
from tempcast.models.scale import Scale

EPSILON = 0.001


def are_equal(a: float, b: float) -> bool:
    """Return ``True`` when *a* and *b* differ by less than :data:`EPSILON`."""
    return abs(a - b) < EPSILON


@dataclasses.dataclass(frozen=True, eq=False)
class Quantity:
    """An immutable temperature value expressed in the units of ``scale``.

    Equality is tolerance based (see :func:`are_equal`) while ordering
    compares the raw values, so two quantities may be both equal and
    strictly ordered when they differ by less than :data:`EPSILON`.
    Instances are unhashable since tolerance equality is not transitive.
    """

    value: float

    scale: ClassVar[Scale]
    _by_scale: ClassVar[dict[Scale, type[Quantity]]] = {}

    def __init_subclass__(cls, *, scale: Scale, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if scale in Quantity._by_scale:
            raise TypeError(f"A quantity class for {scale.value} is already defined")
        cls.scale = scale
        Quantity._by_scale[scale] = cls

    def __post_init__(self) -> None:
        if type(self) is Quantity:
            raise TypeError("Quantity is abstract; use Celsius, Fahrenheit or Kelvin")
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise TypeError(
                f"{type(self).__name__} requires a real number, got {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def for_scale(cls, scale: Scale) -> type[Quantity]:
        """Return the concrete quantity class bound to *scale*."""
        return Quantity._by_scale[scale]

    # ------------------------------------------------------------------
    # Conversion to raw number / display
    # ------------------------------------------------------------------

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}{self.scale.symbol}"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _require_same_scale(self, other: Quantity, action: str) -> None:
        if other.scale is not self.scale:
            raise ScaleMismatchError(
                f"Cannot {action} {type(self).__name__} and {type(other).__name__}; "
                "convert one of them first",
                left=self.scale,
                right=other.scale,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "compare")
        return are_equal(self.value, other.value)

    def __lt__(self, other: Self) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "compare")
        return self.value < other.value

    def __gt__(self, other: Self) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "compare")
        return self.value > other.value

    def __le__(self, other: Self) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "compare")
        return self.value <= other.value

    def __ge__(self, other: Self) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "compare")
        return self.value >= other.value

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "add")
        return type(self)(self.value + other.value)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_scale(other, "subtract")
        return type(self)(self.value - other.value)


class Celsius(Quantity, scale=Scale.CELSIUS):
    """Temperature in degrees Celsius."""


class Fahrenheit(Quantity, scale=Scale.FAHRENHEIT):
    """Temperature in degrees Fahrenheit."""


class Kelvin(Quantity, scale=Scale.KELVIN):
    """Temperature in kelvin."""
