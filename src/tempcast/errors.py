"""Exception hierarchy for tempcast."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tempcast.models.scale import Scale


class TempcastError(Exception):
    """Base class for all tempcast errors."""


class ScaleMismatchError(TempcastError, TypeError):
    """Raised when quantities of two different scales are compared or combined."""

    def __init__(self, message: str, *, left: Scale, right: Scale) -> None:
        super().__init__(message)
        self.left = left
        self.right = right


class UnsupportedConversionError(TempcastError, ValueError):
    """Raised when no conversion rule exists for an ordered pair of scales."""

    def __init__(self, message: str, *, source: Scale, target: Scale) -> None:
        super().__init__(message)
        self.source = source
        self.target = target


class ToleranceViolationError(TempcastError):
    """A round-trip conversion drifted from its original value by EPSILON or more."""

    def __init__(
        self,
        message: str,
        *,
        source: Scale,
        via: Scale,
        expected: float,
        actual: float,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.via = via
        self.expected = expected
        self.actual = actual
