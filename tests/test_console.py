"""Tests for console progress observers."""

import io

from review_radar.adapters.progress import ConsoleMetricsObserver, ConsoleProgressObserver
from review_radar.core import Platform, ScrapingMetrics


def test_metrics_observer_prints_snapshot() -> None:
    """Test metrics line shows counts and rating."""
    stream = io.StringIO()
    observer = ConsoleMetricsObserver(stream)

    observer.emit(ScrapingMetrics(
        total_reviews=100,
        processed=25,
        fake_filtered=2,
        average_rating=4.4,
        platform=Platform.AMAZON,
        processing_speed=50,
        verified_purchases=20,
    ))

    output = stream.getvalue()
    assert "25/100 reviews" in output
    assert " 25.0%" in output
    assert "⭐ 4.4" in output
    assert observer.snapshots == 1


def test_progress_observer_skips_repeats() -> None:
    """Test only increasing progress values are printed."""
    stream = io.StringIO()
    observer = ConsoleProgressObserver(stream)

    for value in (20.0, 40.0, 40.0, 95.0, 100.0):
        observer.emit(value)

    lines = stream.getvalue().splitlines()
    assert lines == [
        "  └─ Analysis: 20%",
        "  └─ Analysis: 40%",
        "  └─ Analysis: 95%",
        "  └─ Analysis: 100%",
    ]
