"""Core domain layer."""

from review_radar.core.catalog import RecommendationCatalog
from review_radar.core.entities import (
    ActionItem,
    ActionType,
    AnalysisResults,
    Concern,
    InsightReport,
    Platform,
    ProductInfo,
    Recommendation,
    RecommendationPriority,
    ReviewCluster,
    ReviewSummary,
    SampleReview,
    ScrapingMetrics,
    ScrapingResult,
    Sentiment,
    SentimentScore,
    SentimentTrendPoint,
    Severity,
    Strength,
    TextValidation,
    Theme,
    ThemeSignal,
    UrgencyLevel,
    UrlValidation,
)
from review_radar.core.errors import (
    AcquisitionTimeout,
    AnalysisTimeout,
    InvalidInput,
    ReviewRadarError,
)
from review_radar.core.interfaces import (
    MetricsObserver,
    ProgressObserver,
    ReportGenerator,
    ReviewAcquirer,
)
from review_radar.core.synthesizer import InsightSynthesizer

__all__ = [
    "ActionItem",
    "ActionType",
    "AnalysisResults",
    "Concern",
    "InsightReport",
    "Platform",
    "ProductInfo",
    "Recommendation",
    "RecommendationPriority",
    "ReviewCluster",
    "ReviewSummary",
    "SampleReview",
    "ScrapingMetrics",
    "ScrapingResult",
    "Sentiment",
    "SentimentScore",
    "SentimentTrendPoint",
    "Severity",
    "Strength",
    "TextValidation",
    "Theme",
    "ThemeSignal",
    "UrgencyLevel",
    "UrlValidation",
    "AcquisitionTimeout",
    "AnalysisTimeout",
    "InvalidInput",
    "ReviewRadarError",
    "MetricsObserver",
    "ProgressObserver",
    "ReportGenerator",
    "ReviewAcquirer",
    "RecommendationCatalog",
    "InsightSynthesizer",
]
