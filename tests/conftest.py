"""Shared test fixtures for the lcsviz test suite."""

from __future__ import annotations

from typing import Any

import pytest

from lcsviz.config import LcsvizConfig
from lcsviz.session import LCSVisualizer


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def names(self) -> list[str]:
        return [c["name"] for c in self.increments + self.timings + self.gauges]


@pytest.fixture
def config() -> LcsvizConfig:
    """Default configuration."""
    return LcsvizConfig()


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def visualizer(metrics: RecordingMetricsHook) -> LCSVisualizer:
    """A fresh session wired to a recording metrics backend."""
    return LCSVisualizer(metrics=metrics)
