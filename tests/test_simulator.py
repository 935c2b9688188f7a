"""Tests for the acquisition simulator."""

import pytest

from conftest import FixedRandom, endless_sleep, instant_sleep

from review_radar.adapters.acquisition import AcquisitionSimulator
from review_radar.adapters.acquisition.corpus import build_review_text, reviews_for
from review_radar.config import AcquisitionConfig
from review_radar.core import AcquisitionTimeout, Platform


@pytest.mark.asyncio
async def test_run_reports_monotonic_progress(metrics_observer) -> None:
    """Test snapshots arrive in order and end at the total."""
    simulator = AcquisitionSimulator(rng=FixedRandom([0.0]), sleep=instant_sleep)

    result = await simulator.run("https://www.amazon.in/dp/X", metrics_observer)

    processed = [m.processed for m in metrics_observer.snapshots]
    assert processed == list(range(8, 81, 8))
    assert processed == sorted(processed)
    assert all(m.total_reviews == 80 for m in metrics_observer.snapshots)
    assert metrics_observer.snapshots[-1].processed == 80

    assert result.platform == Platform.AMAZON
    assert result.product_info.total_reviews == 80
    assert result.product_info.rating == 3.5
    assert result.product_info.name == "Sample Product"


@pytest.mark.asyncio
async def test_run_snapshot_fields(metrics_observer) -> None:
    """Test snapshot values stay inside their ranges."""
    simulator = AcquisitionSimulator(rng=FixedRandom([0.0, 0.5, 0.99, 0.3]), sleep=instant_sleep)

    await simulator.run("https://www.meesho.com/saree/p/1", metrics_observer)

    for metrics in metrics_observer.snapshots:
        assert 3.5 <= metrics.average_rating <= 5.0
        assert 45 <= metrics.processing_speed <= 70
        assert metrics.verified_purchases <= metrics.processed
        assert metrics.platform == Platform.MEESHO

    fakes = [m.fake_filtered for m in metrics_observer.snapshots]
    assert fakes == sorted(fakes)


@pytest.mark.asyncio
async def test_run_clamps_last_step(metrics_observer) -> None:
    """Test the final tick never overshoots the total."""
    config = AcquisitionConfig(min_reviews=10, max_reviews=10, min_step=7, max_step=7)
    simulator = AcquisitionSimulator(config, FixedRandom([0.0]), sleep=instant_sleep)

    await simulator.run("https://www.flipkart.com/x", metrics_observer)

    assert [m.processed for m in metrics_observer.snapshots] == [7, 10]


@pytest.mark.asyncio
async def test_run_review_text_from_corpus() -> None:
    """Test the result text cycles the platform corpus."""
    simulator = AcquisitionSimulator(rng=FixedRandom([0.0]), sleep=instant_sleep)

    result = await simulator.run("https://www.zomato.com/cafe")

    sentences = result.review_text.split("\n\n")
    assert len(sentences) == 80
    assert sentences[0] == reviews_for(Platform.ZOMATO)[0]
    assert result.product_info.name == "Restaurant Reviews"


@pytest.mark.asyncio
async def test_run_times_out(metrics_observer) -> None:
    """Test a stalled run raises and emits nothing afterwards."""
    config = AcquisitionConfig(timeout=0.05)
    simulator = AcquisitionSimulator(config, FixedRandom([0.0]), sleep=endless_sleep)

    with pytest.raises(AcquisitionTimeout, match="Scraping operation timed out after 0.05s"):
        await simulator.run("https://www.amazon.in/dp/X", metrics_observer)

    assert metrics_observer.snapshots == []


@pytest.mark.asyncio
async def test_runs_are_independent(metrics_observer) -> None:
    """Test counters restart on every run."""
    simulator = AcquisitionSimulator(rng=FixedRandom([0.0]), sleep=instant_sleep)

    await simulator.run("https://www.amazon.in/dp/X")
    await simulator.run("https://www.amazon.in/dp/X", metrics_observer)

    assert metrics_observer.snapshots[0].processed == 8


@pytest.mark.asyncio
async def test_observer_errors_propagate() -> None:
    """Test a failing observer fails the run."""
    class Broken:
        def emit(self, metrics) -> None:
            raise RuntimeError("observer failed")

    simulator = AcquisitionSimulator(rng=FixedRandom([0.0]), sleep=instant_sleep)

    with pytest.raises(RuntimeError, match="observer failed"):
        await simulator.run("https://www.amazon.in/dp/X", Broken())


def test_build_review_text_fallback_corpus() -> None:
    """Test platforms without a corpus reuse Amazon's sentences."""
    text = build_review_text(Platform.NYKAA, 3)

    assert text.split("\n\n") == reviews_for(Platform.AMAZON)[:3]
    assert build_review_text(Platform.AMAZON, 0) == ""
