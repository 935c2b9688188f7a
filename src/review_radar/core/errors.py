"""Domain errors."""

from typing import Iterable


class ReviewRadarError(Exception):
    """Base class for review radar failures."""


class AcquisitionTimeout(ReviewRadarError):
    """Acquisition run did not settle before its deadline."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Scraping operation timed out after {timeout:g}s")


class AnalysisTimeout(ReviewRadarError):
    """Analysis pipeline did not settle before its deadline."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Analysis timed out after {timeout:g}s")


class InvalidInput(ReviewRadarError):
    """Input rejected by validation."""

    def __init__(self, issues: Iterable[str]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(self.issues) or "Invalid input")
