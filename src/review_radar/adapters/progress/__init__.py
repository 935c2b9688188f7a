"""Progress observers."""

from review_radar.adapters.progress.console import ConsoleMetricsObserver, ConsoleProgressObserver

__all__ = ["ConsoleMetricsObserver", "ConsoleProgressObserver"]
