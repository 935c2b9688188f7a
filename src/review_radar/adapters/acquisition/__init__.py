"""Review acquisition adapters."""

from review_radar.adapters.acquisition.simulator import AcquisitionSimulator

__all__ = ["AcquisitionSimulator"]
