"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from review_radar.core.entities import InsightReport, ScrapingMetrics, ScrapingResult


class MetricsObserver(ABC):
    """Receives acquisition metrics snapshots in tick order."""

    @abstractmethod
    def emit(self, metrics: ScrapingMetrics) -> None:
        """Handle one metrics snapshot."""
        pass


class ProgressObserver(ABC):
    """Receives analysis progress percentages in tick order."""

    @abstractmethod
    def emit(self, progress: float) -> None:
        """Handle one progress update (0-100)."""
        pass


class ReviewAcquirer(ABC):
    """Interface for gathering raw review text for a product URL."""

    @abstractmethod
    async def run(
        self, url: str, observer: Optional[MetricsObserver] = None
    ) -> ScrapingResult:
        """Acquire reviews, reporting progress to the observer."""
        pass


class ReportGenerator(ABC):
    """Interface for rendering insight reports."""

    @abstractmethod
    async def generate(self, report: InsightReport) -> str:
        """Render report to text."""
        pass
