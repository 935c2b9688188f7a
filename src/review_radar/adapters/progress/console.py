"""Console progress reporting for the CLI."""

import sys
from typing import Optional, TextIO

from review_radar.core.entities import ScrapingMetrics
from review_radar.core.interfaces import MetricsObserver, ProgressObserver


class ConsoleMetricsObserver(MetricsObserver):
    """Print acquisition metrics as they arrive."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self.snapshots = 0

    def emit(self, metrics: ScrapingMetrics) -> None:
        self.snapshots += 1
        print(
            f"  [{metrics.progress:5.1f}%] {metrics.processed}/{metrics.total_reviews} reviews"
            f" • fake filtered: {metrics.fake_filtered}"
            f" • verified: {metrics.verified_purchases}"
            f" • ⭐ {metrics.average_rating:.1f}"
            f" • {metrics.processing_speed}/min",
            file=self.stream,
        )


class ConsoleProgressObserver(ProgressObserver):
    """Print analysis progress, skipping repeated values."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self.last: Optional[float] = None

    def emit(self, progress: float) -> None:
        if self.last is not None and progress <= self.last:
            return
        self.last = progress
        print(f"  └─ Analysis: {progress:.0f}%", file=self.stream)
