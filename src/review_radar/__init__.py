"""Review Radar: themed insight clusters from customer reviews."""

__version__ = "0.1.0"
