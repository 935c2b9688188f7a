"""Simulated review acquisition with progress reporting and a deadline."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from review_radar.adapters.acquisition.corpus import build_review_text, product_name_for
from review_radar.config import AcquisitionConfig
from review_radar.core import platforms
from review_radar.core.entities import Platform, ProductInfo, ScrapingMetrics, ScrapingResult
from review_radar.core.errors import AcquisitionTimeout
from review_radar.core.interfaces import MetricsObserver, ReviewAcquirer
from review_radar.core.race import TimedOut, race_deadline
from review_radar.core.randomness import RandomSource, default_source, randint, round1, uniform

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AcquisitionSimulator(ReviewAcquirer):
    """Generate a review corpus for a URL as if it were crawled.

    Each tick advances the processed count and emits a fresh metrics
    snapshot. The run either settles with a ``ScrapingResult`` or is
    cancelled by the deadline and raises ``AcquisitionTimeout``.
    """

    emoji = "🕸️"
    name = "Review Acquisition"

    def __init__(
        self,
        config: Optional[AcquisitionConfig] = None,
        rng: Optional[RandomSource] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.config = config or AcquisitionConfig()
        self.rng = rng or default_source()
        self.sleep = sleep

    async def run(
        self, url: str, observer: Optional[MetricsObserver] = None
    ) -> ScrapingResult:
        """Acquire reviews for a URL, racing the configured deadline."""
        platform = platforms.detect(url)
        logger.info("Acquisition started: platform=%s url=%s", platform.value, url)

        outcome = await race_deadline(
            self._acquire(platform, observer), self.config.timeout
        )
        if isinstance(outcome, TimedOut):
            logger.warning("Acquisition timed out after %.1fs: %s", outcome.timeout, url)
            raise AcquisitionTimeout(outcome.timeout)

        result = outcome.value
        logger.info(
            "Acquisition settled: platform=%s reviews=%d rating=%.1f",
            result.platform.value,
            result.product_info.total_reviews,
            result.product_info.rating,
        )
        return result

    async def _acquire(
        self, platform: Platform, observer: Optional[MetricsObserver]
    ) -> ScrapingResult:
        cfg = self.config
        total = randint(self.rng, cfg.min_reviews, cfg.max_reviews)
        processed = 0
        fake_filtered = 0

        while True:
            await self.sleep(cfg.tick_interval)

            processed = min(processed + randint(self.rng, cfg.min_step, cfg.max_step), total)
            fake_filtered += randint(self.rng, cfg.min_fake_step, cfg.max_fake_step)

            metrics = self._snapshot(platform, total, processed, fake_filtered)
            logger.debug("Acquisition tick: %d/%d", processed, total)
            if observer is not None:
                observer.emit(metrics)

            if processed == total:
                break

        review_text = build_review_text(platform, min(total, cfg.max_sample_reviews))
        return ScrapingResult(
            review_text=review_text,
            platform=platform,
            product_info=ProductInfo(
                name=product_name_for(platform),
                rating=metrics.average_rating,
                total_reviews=total,
            ),
        )

    def _snapshot(
        self, platform: Platform, total: int, processed: int, fake_filtered: int
    ) -> ScrapingMetrics:
        return ScrapingMetrics(
            total_reviews=total,
            processed=processed,
            fake_filtered=fake_filtered,
            average_rating=round1(uniform(self.rng, 3.5, 5.0)),
            platform=platform,
            processing_speed=randint(self.rng, 45, 70),
            verified_purchases=int(processed * uniform(self.rng, 0.75, 0.95)),
        )
