"""Core domain entities."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Platform(str, Enum):
    """Source platform a review URL belongs to."""

    AMAZON = "Amazon"
    FLIPKART = "Flipkart"
    MEESHO = "Meesho"
    MYNTRA = "Myntra"
    ZOMATO = "Zomato"
    SWIGGY = "Swiggy"
    NYKAA = "Nykaa"
    AJIO = "Ajio"
    GENERIC_ECOMMERCE = "Generic E-commerce"
    UNKNOWN = "Unknown"
    INVALID = "Invalid"


class Theme(str, Enum):
    """Business dimension reviews are bucketed into."""

    DELIVERY_EXPERIENCE = "Delivery Experience"
    PRODUCT_QUALITY = "Product Quality"
    CUSTOMER_SERVICE = "Customer Service"
    VALUE_FOR_MONEY = "Value for Money"


class ActionType(str, Enum):
    """Whether a theme needs fixing or should be kept as is."""

    FIX = "Fix"
    KEEP = "Keep"


class UrgencyLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RecommendationPriority(str, Enum):
    CRITICAL = "Critical"
    IMPORTANT = "Important"
    MODERATE = "Moderate"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Severity(str, Enum):
    """Priority of action items and severity of concerns."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _serialize(value: Any) -> Any:
    """Convert enums and nested containers to JSON-friendly values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


class _DictMixin:
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict representation."""
        return _serialize(asdict(self))


@dataclass
class ScrapingMetrics(_DictMixin):
    """Progress snapshot of an acquisition run."""

    total_reviews: int
    processed: int
    fake_filtered: int
    average_rating: float
    platform: Platform
    processing_speed: int
    verified_purchases: int

    def __post_init__(self) -> None:
        if self.processed < 0:
            raise ValueError("Processed count cannot be negative")
        if self.processed > self.total_reviews:
            raise ValueError("Processed count cannot exceed total reviews")
        if not 0.0 <= self.average_rating <= 5.0:
            raise ValueError("Average rating must be between 0 and 5")

    @property
    def progress(self) -> float:
        """Completion percentage of the run."""
        if self.total_reviews == 0:
            return 100.0
        return self.processed / self.total_reviews * 100


@dataclass
class ProductInfo(_DictMixin):
    name: str
    rating: float
    total_reviews: int


@dataclass
class ScrapingResult(_DictMixin):
    """Outcome of a settled acquisition run."""

    review_text: str
    platform: Platform
    product_info: ProductInfo


@dataclass(frozen=True)
class ThemeSignal:
    """Keyword flags found in raw review text."""

    delivery_issue: bool
    quality_issue: bool
    service_issue: bool
    positive_tone: bool


@dataclass(frozen=True)
class SentimentScore(_DictMixin):
    sentiment: Sentiment
    confidence: int


@dataclass(frozen=True)
class Recommendation(_DictMixin):
    """Remediation playbook entry."""

    action: str
    priority: RecommendationPriority
    timeframe: str
    expected_impact: str
    implementation_steps: tuple[str, ...]


@dataclass(frozen=True)
class SampleReview(_DictMixin):
    """Illustrative review shown next to a cluster."""

    id: str
    text: str
    rating: int
    reviewer: str
    source: str
    date: str

    def __post_init__(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValueError("Sample rating must be between 1 and 5")


@dataclass(frozen=True)
class ReviewCluster(_DictMixin):
    """Synthesized insight for one theme."""

    id: str
    theme: Theme
    insight: str
    action_type: ActionType
    rating: float
    review_count: int
    source: str
    urgency_level: UrgencyLevel
    impact_score: float
    recommendations: tuple[Recommendation, ...]
    samples: tuple[SampleReview, ...]

    def __post_init__(self) -> None:
        if not 1.0 <= self.rating <= 5.0:
            raise ValueError("Cluster rating must be between 1 and 5")
        if not 0.0 <= self.impact_score <= 10.0:
            raise ValueError("Impact score must be between 0 and 10")


@dataclass
class ReviewSummary(_DictMixin):
    rating: float
    review_count: int
    sentiment: Sentiment
    trust_score: int
    key_insights: list[str]


@dataclass
class ActionItem(_DictMixin):
    """Department-level follow-up derived from the text."""

    id: str
    priority: Severity
    department: str
    action: str
    impact: str
    timeframe: str


@dataclass
class SentimentTrendPoint(_DictMixin):
    period: str
    positive: int
    negative: int
    neutral: int


@dataclass
class Concern(_DictMixin):
    issue: str
    mentions: int
    severity: Severity


@dataclass
class Strength(_DictMixin):
    aspect: str
    rating: float
    mentions: int


@dataclass
class AnalysisResults(_DictMixin):
    """Full analysis of a review corpus."""

    summary: ReviewSummary
    action_items: list[ActionItem]
    sentiment_trend: list[SentimentTrendPoint]
    top_concerns: list[Concern]
    strengths: list[Strength]
    metrics: ScrapingMetrics


@dataclass(frozen=True)
class UrlValidation(_DictMixin):
    is_valid: bool
    platform: Platform
    message: str


@dataclass(frozen=True)
class TextValidation(_DictMixin):
    is_valid: bool
    issues: tuple[str, ...]


@dataclass
class InsightReport(_DictMixin):
    """Everything produced by one end-to-end analysis."""

    source_label: str
    clusters: list[ReviewCluster]
    analysis: AnalysisResults
    scraping: Optional[ScrapingResult] = None
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def fix_clusters(self) -> list[ReviewCluster]:
        return [c for c in self.clusters if c.action_type == ActionType.FIX]

    @property
    def keep_clusters(self) -> list[ReviewCluster]:
        return [c for c in self.clusters if c.action_type == ActionType.KEEP]
