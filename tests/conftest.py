"""Shared fixtures for the tempcast test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any handler installed by ``setup_logging`` so caplog keeps working."""
    yield
    logger = logging.getLogger("tempcast")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests."""
    monkeypatch.delenv("TEMPCAST_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("TEMPCAST_VERBOSE", raising=False)
