"""Shared test helpers."""

import asyncio
from typing import Sequence

import pytest

from review_radar.core import MetricsObserver, ProgressObserver, ScrapingMetrics


class FixedRandom:
    """Random source that cycles through a fixed sequence."""

    def __init__(self, values: Sequence[float] = (0.0,)) -> None:
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class RecordingMetricsObserver(MetricsObserver):
    def __init__(self) -> None:
        self.snapshots: list[ScrapingMetrics] = []

    def emit(self, metrics: ScrapingMetrics) -> None:
        self.snapshots.append(metrics)


class RecordingProgressObserver(ProgressObserver):
    def __init__(self) -> None:
        self.values: list[float] = []

    def emit(self, progress: float) -> None:
        self.values.append(progress)


async def instant_sleep(delay: float) -> None:
    await asyncio.sleep(0)


async def endless_sleep(delay: float) -> None:
    await asyncio.Event().wait()


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    return FixedRandom


@pytest.fixture
def metrics_observer() -> RecordingMetricsObserver:
    return RecordingMetricsObserver()


@pytest.fixture
def progress_observer() -> RecordingProgressObserver:
    return RecordingProgressObserver()
