"""Round-trip self-check over a fixed set of sample quantities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempcast.conversion.converter import convert
from tempcast.errors import ToleranceViolationError
from tempcast.literals import celsius, fahrenheit, kelvin
from tempcast.models.quantity import EPSILON, Quantity
from tempcast.models.scale import Scale
from tempcast.selfcheck.models import RoundTripResult, SelfCheckReport

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

SAMPLES: tuple[Quantity, ...] = (celsius(36.5), fahrenheit(79.0), kelvin(100.0))


def round_trip(quantity: Quantity, via: Scale) -> RoundTripResult:
    """Convert *quantity* to *via* and back, recording how far it drifted."""
    source_cls = type(quantity)
    # convert() is typed per pair; the scales here are only known at runtime.
    intermediate = convert(quantity, Quantity.for_scale(via))  # type: ignore[call-overload]
    back = convert(intermediate, source_cls)
    return RoundTripResult(
        source=quantity.scale,
        via=via,
        expected=quantity.value,
        intermediate=intermediate.value,
        actual=back.value,
        delta=abs(back.value - quantity.value),
        passed=back == quantity,
    )


def run_self_check(samples: Iterable[Quantity] = SAMPLES) -> SelfCheckReport:
    """Round-trip every sample through each of the other two scales.

    Never raises on drift; inspect the report or pass it to
    :func:`verify_self_check`.
    """
    results: list[RoundTripResult] = []
    for sample in samples:
        for via in Scale:
            if via is sample.scale:
                continue
            result = round_trip(sample, via)
            if not result.passed:
                logger.warning(
                    "Round trip %s drifted: expected %s, got %s",
                    result.label,
                    result.expected,
                    result.actual,
                )
            results.append(result)

    report = SelfCheckReport(epsilon=EPSILON, results=results)
    logger.info(
        "Self-check finished: %d/%d round trips within %s",
        len(results) - len(report.failures),
        len(results),
        EPSILON,
    )
    return report


def verify_self_check(report: SelfCheckReport) -> None:
    """Raise :class:`ToleranceViolationError` for the first failed round trip."""
    failures = report.failures
    if not failures:
        return
    first = failures[0]
    raise ToleranceViolationError(
        f"Round trip {first.label} expected {first.expected} but got {first.actual} "
        f"(|delta| {first.delta:.6g} >= {report.epsilon}); "
        f"{len(failures)} of {len(report.results)} round trips failed",
        source=first.source,
        via=first.via,
        expected=first.expected,
        actual=first.actual,
    )
