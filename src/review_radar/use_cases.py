"""Business logic use cases."""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

from review_radar.config import AnalysisConfig, ValidationConfig
from review_radar.core import (
    AnalysisResults,
    AnalysisTimeout,
    InsightReport,
    InsightSynthesizer,
    InvalidInput,
    MetricsObserver,
    ProgressObserver,
    ReviewAcquirer,
    ReviewCluster,
    ScrapingMetrics,
    TextValidation,
)
from review_radar.core import platforms
from review_radar.core.classifier import validate_review_text
from review_radar.core.race import TimedOut, race_deadline
from review_radar.core.randomness import uniform

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

PROGRESS_CAP = 95.0
PROGRESS_DONE = 100.0


class AnalysisService:
    """Run the insight synthesizer as a progress-reporting, deadline-bound job."""

    def __init__(
        self,
        synthesizer: InsightSynthesizer,
        config: Optional[AnalysisConfig] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.synthesizer = synthesizer
        self.config = config or AnalysisConfig()
        self.sleep = sleep

    def build_clusters(self, text: str) -> list[ReviewCluster]:
        """Themed clusters for the text."""
        return self.synthesizer.build_clusters(text)

    async def analyze_reviews(
        self,
        text: str,
        observer: Optional[ProgressObserver] = None,
        metrics: Optional[ScrapingMetrics] = None,
    ) -> AnalysisResults:
        """Analyze text, emitting progress until done or the deadline fires."""
        outcome = await race_deadline(
            self._analyze(text, observer, metrics), self.config.timeout
        )
        if isinstance(outcome, TimedOut):
            logger.warning("Analysis timed out after %.1fs", outcome.timeout)
            raise AnalysisTimeout(outcome.timeout)
        return outcome.value

    async def _analyze(
        self,
        text: str,
        observer: Optional[ProgressObserver],
        metrics: Optional[ScrapingMetrics],
    ) -> AnalysisResults:
        cfg = self.config
        rng = self.synthesizer.rng
        progress = 0.0

        while progress < PROGRESS_CAP:
            await self.sleep(cfg.tick_interval)
            progress += uniform(rng, cfg.min_step, cfg.min_step + cfg.step_spread)
            if observer is not None:
                observer.emit(min(progress, PROGRESS_CAP))

        if observer is not None:
            observer.emit(PROGRESS_DONE)

        results = self.synthesizer.build_analysis(text, metrics)
        await self.sleep(cfg.settle_delay)
        return results


class _MetricsRecorder(MetricsObserver):
    """Remember the last snapshot while forwarding to another observer."""

    def __init__(self, forward: Optional[MetricsObserver] = None) -> None:
        self.forward = forward
        self.last: Optional[ScrapingMetrics] = None

    def emit(self, metrics: ScrapingMetrics) -> None:
        self.last = metrics
        if self.forward is not None:
            self.forward.emit(metrics)


class InsightService:
    """End-to-end analysis of a product URL or pasted review text."""

    def __init__(
        self,
        acquirer: ReviewAcquirer,
        analysis_service: AnalysisService,
        validation: Optional[ValidationConfig] = None,
    ) -> None:
        self.acquirer = acquirer
        self.analysis_service = analysis_service
        self.validation = validation or ValidationConfig()

    def validate_text(self, text: str) -> TextValidation:
        """Check text against the configured limits."""
        return validate_review_text(
            text,
            min_length=self.validation.min_length,
            max_length=self.validation.max_length,
            min_words=self.validation.min_words,
        )

    async def analyze_url(
        self,
        url: str,
        metrics_observer: Optional[MetricsObserver] = None,
        progress_observer: Optional[ProgressObserver] = None,
    ) -> InsightReport:
        """Acquire reviews for a URL and analyze them."""
        validation = platforms.validate(url)
        if not validation.is_valid:
            raise InvalidInput([validation.message])

        recorder = _MetricsRecorder(metrics_observer)
        scraping = await self.acquirer.run(url, recorder)

        clusters = self.analysis_service.build_clusters(scraping.review_text)
        analysis = await self.analysis_service.analyze_reviews(
            scraping.review_text, progress_observer, recorder.last
        )

        return InsightReport(
            source_label=f"{scraping.product_info.name} ({scraping.platform.value})",
            clusters=clusters,
            analysis=analysis,
            scraping=scraping,
        )

    async def analyze_text(
        self,
        text: str,
        progress_observer: Optional[ProgressObserver] = None,
        source_label: str = "Pasted reviews",
    ) -> InsightReport:
        """Validate and analyze raw review text."""
        validation = self.validate_text(text)
        if not validation.is_valid:
            raise InvalidInput(validation.issues)

        clusters = self.analysis_service.build_clusters(text)
        analysis = await self.analysis_service.analyze_reviews(text, progress_observer)

        return InsightReport(
            source_label=source_label,
            clusters=clusters,
            analysis=analysis,
        )

    def save_report(self, content: str, output_path: Path) -> None:
        """Save rendered report to file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Report saved to %s", output_path)
