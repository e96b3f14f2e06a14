"""Shared pytest fixtures for the full jobslug test suite."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def _isolate_runtime_configuration(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear jobslug environment variables and reset loguru handlers after each test."""

    monkeypatch.delenv("JOBSLUG_EXTRA_STOP_WORDS", raising=False)
    monkeypatch.delenv("JOBSLUG_VERBOSE", raising=False)
    yield
    logger.remove()
    logger.disable("jobslug")
