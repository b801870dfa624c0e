"""Pydantic v2 models describing a self-check run."""

from __future__ import annotations

from pydantic import BaseModel, computed_field

from tempcast.models.scale import Scale


class RoundTripResult(BaseModel):
    """Outcome of converting one sample out to ``via`` and back again."""

    source: Scale
    via: Scale
    expected: float
    intermediate: float
    actual: float
    delta: float
    passed: bool

    @property
    def label(self) -> str:
        return f"{self.source.symbol} -> {self.via.symbol} -> {self.source.symbol}"


class SelfCheckReport(BaseModel):
    """All round trips performed by one self-check run."""

    epsilon: float
    results: list[RoundTripResult]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[RoundTripResult]:
        return [r for r in self.results if not r.passed]
