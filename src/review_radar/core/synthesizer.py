"""
Insight Synthesizer
===================

Turns classification output into review clusters and a full analysis
(summary, action items, sentiment trend, concerns, strengths).

Cluster fields come from fixed per-theme tables; the analysis mixes
keyword checks with bounded random jitter drawn from an injectable
random source, so tests can pin every number.

Usage:
    synthesizer = InsightSynthesizer(RecommendationCatalog(), rng)
    clusters = synthesizer.build_clusters(text)
    analysis = synthesizer.build_analysis(text, metrics)
"""

import logging
from typing import Optional

from review_radar.core.catalog import RecommendationCatalog
from review_radar.core.classifier import classify, count_sentiment_words
from review_radar.core.entities import (
    ActionItem,
    ActionType,
    AnalysisResults,
    Concern,
    Platform,
    ReviewCluster,
    ReviewSummary,
    ScrapingMetrics,
    Sentiment,
    SentimentTrendPoint,
    Severity,
    Strength,
    Theme,
    ThemeSignal,
)
from review_radar.core.profiles import THEME_PROFILES, ThemeProfile
from review_radar.core.randomness import RandomSource, default_source, randint, round1, uniform

logger = logging.getLogger(__name__)

SENTIMENT_THRESHOLD = 0.3
WORDS_PER_SENTIMENT_UNIT = 50

BASE_RATING = {
    Sentiment.POSITIVE: 4.3,
    Sentiment.NEGATIVE: 3.6,
    Sentiment.NEUTRAL: 3.9,
}

STRENGTH_BASE_RATING = {
    Sentiment.POSITIVE: 4.4,
    Sentiment.NEGATIVE: 3.9,
    Sentiment.NEUTRAL: 4.1,
}

# (period, positive base, positive spread, negative base, negative spread)
TREND_SHAPE = [
    ("Week 1", 65, 8, 25, 6),
    ("Week 2", 68, 8, 23, 5),
    ("Week 3", 71, 8, 21, 5),
    ("Week 4", 73, 7, 19, 4),
]
TREND_NEUTRAL = 10

MAX_KEY_INSIGHTS = 4
MIN_KEY_INSIGHTS = 3
MAX_ACTION_ITEMS = 3
MAX_CONCERNS = 3


def _has(text: str, *terms: str) -> bool:
    return any(term in text for term in terms)


def classify_ratio(ratio: float) -> Sentiment:
    """Map an aggregate sentiment ratio to a sentiment class."""
    if ratio > SENTIMENT_THRESHOLD:
        return Sentiment.POSITIVE
    if ratio < -SENTIMENT_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def sentiment_ratio(text: str) -> float:
    """(positive - negative) hits per 50 words, at least one unit."""
    positive, negative, total_words = count_sentiment_words(text)
    return (positive - negative) / max(total_words / WORDS_PER_SENTIMENT_UNIT, 1)


class InsightSynthesizer:
    """Build clusters and analysis results from raw review text."""

    def __init__(
        self,
        catalog: Optional[RecommendationCatalog] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.catalog = catalog or RecommendationCatalog()
        self.rng = rng or default_source()

    # ------------------------------------------------------------------
    # Clusters
    # ------------------------------------------------------------------

    def build_clusters(self, text: str) -> list[ReviewCluster]:
        """One cluster per tracked theme, in fixed theme order."""
        signal = classify(text)
        return [self._build_cluster(profile, self._has_issue(profile, signal)) for profile in THEME_PROFILES]

    @staticmethod
    def _has_issue(profile: ThemeProfile, signal: ThemeSignal) -> bool:
        return {
            Theme.DELIVERY_EXPERIENCE: signal.delivery_issue,
            Theme.PRODUCT_QUALITY: signal.quality_issue,
            Theme.CUSTOMER_SERVICE: signal.service_issue,
            # Value for Money is healthy only when the tone is positive.
            Theme.VALUE_FOR_MONEY: not signal.positive_tone,
        }[profile.theme]

    def _build_cluster(self, profile: ThemeProfile, has_issue: bool) -> ReviewCluster:
        branch = profile.branch(has_issue)
        action_type = ActionType.FIX if has_issue else ActionType.KEEP
        return ReviewCluster(
            id=profile.id,
            theme=profile.theme,
            insight=branch.insight,
            action_type=action_type,
            rating=branch.rating,
            review_count=profile.review_count,
            source=profile.source,
            urgency_level=branch.urgency,
            impact_score=branch.impact_score,
            recommendations=tuple(self.catalog.lookup(profile.theme, action_type)),
            samples=branch.samples,
        )

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def build_analysis(
        self, text: str, metrics: Optional[ScrapingMetrics] = None
    ) -> AnalysisResults:
        """Full analysis of the text; metrics from acquisition are reused when given."""
        lowered = text.lower()
        sentiment = classify_ratio(sentiment_ratio(lowered))

        rating = round1(BASE_RATING[sentiment] + uniform(self.rng, -0.2, 0.2))
        review_count = metrics.total_reviews if metrics else randint(self.rng, 100, 199)
        trust_score = randint(self.rng, 82, 95)

        summary = ReviewSummary(
            rating=rating,
            review_count=review_count,
            sentiment=sentiment,
            trust_score=trust_score,
            key_insights=self.key_insights(lowered, sentiment),
        )

        results = AnalysisResults(
            summary=summary,
            action_items=self.action_items(lowered, sentiment),
            sentiment_trend=self.sentiment_trend(),
            top_concerns=self.top_concerns(lowered),
            strengths=self.strengths(lowered, sentiment),
            metrics=metrics or self._synthesize_metrics(review_count, rating),
        )
        logger.info(
            "Analysis built: sentiment=%s rating=%.1f insights=%d actions=%d concerns=%d",
            sentiment.value, rating, len(summary.key_insights),
            len(results.action_items), len(results.top_concerns),
        )
        return results

    def _synthesize_metrics(self, review_count: int, rating: float) -> ScrapingMetrics:
        return ScrapingMetrics(
            total_reviews=review_count,
            processed=review_count - randint(self.rng, 0, 7),
            fake_filtered=randint(self.rng, 3, 14),
            average_rating=rating,
            platform=Platform.UNKNOWN,
            processing_speed=randint(self.rng, 55, 79),
            verified_purchases=int(review_count * 0.79),
        )

    def key_insights(self, text: str, sentiment: Sentiment) -> list[str]:
        """Ordered theme checks, topped up with sentiment-based insights."""
        insights: list[str] = []

        if _has(text, "delivery", "shipping", "arrived"):
            if _has(text, "fast", "quick", "on time"):
                insights.append("Delivery service consistently meets customer expectations")
            elif _has(text, "slow", "delayed", "late"):
                insights.append("Delivery timing requires optimization for better satisfaction")
            else:
                insights.append("Delivery experience varies across customer orders")

        if "quality" in text:
            if sentiment == Sentiment.POSITIVE:
                insights.append("Product quality receives strong positive feedback")
            else:
                insights.append("Quality improvements needed based on customer feedback")

        if _has(text, "service", "support"):
            if _has(text, "helpful", "excellent", "good"):
                insights.append("Customer service team demonstrates strong performance")
            elif _has(text, "poor", "bad", "rude"):
                insights.append("Customer service experience needs enhancement")
            else:
                insights.append("Customer service performance shows mixed results")

        if _has(text, "price", "value", "money"):
            if _has(text, "good value", "worth", "affordable"):
                insights.append("Customers perceive good value for money in pricing")
            elif _has(text, "expensive", "overpriced"):
                insights.append("Pricing strategy may need review for better perception")

        if not insights:
            if sentiment == Sentiment.POSITIVE:
                insights.append("Overall customer experience shows positive trends")
                insights.append("Product performance generally meets customer expectations")
            elif sentiment == Sentiment.NEGATIVE:
                insights.append("Multiple improvement opportunities identified from feedback")
                insights.append("Customer concerns require immediate attention and action")
            else:
                insights.append("Mixed customer feedback indicates balanced performance")
                insights.append("Consistent quality needed to improve satisfaction scores")

        if len(insights) < MIN_KEY_INSIGHTS:
            if sentiment == Sentiment.POSITIVE:
                insights.append("Strong customer loyalty and repeat purchase indicators")
                insights.append("Recommendation rate suggests satisfied customer base")
            else:
                insights.append("Strategic improvements needed across key touchpoints")
                insights.append("Customer retention at risk without addressing concerns")

        return insights[:MAX_KEY_INSIGHTS]

    def action_items(self, text: str, sentiment: Sentiment) -> list[ActionItem]:
        """Department follow-ups; one generic item when nothing matched."""
        actions: list[ActionItem] = []

        if _has(text, "delivery", "shipping"):
            if _has(text, "slow", "delayed", "late"):
                actions.append(ActionItem(
                    id="1",
                    priority=Severity.HIGH,
                    department="Logistics",
                    action="Partner with faster delivery services and optimize shipping routes",
                    impact="Reduce delivery complaints by 30-40% and improve satisfaction",
                    timeframe="2-4 weeks",
                ))
            elif sentiment == Sentiment.POSITIVE:
                actions.append(ActionItem(
                    id="1",
                    priority=Severity.LOW,
                    department="Logistics",
                    action="Maintain current delivery standards and explore further optimization",
                    impact="Sustain positive delivery experience and customer satisfaction",
                    timeframe="1-2 weeks",
                ))

        if "quality" in text:
            if sentiment == Sentiment.NEGATIVE or _has(text, "poor", "bad"):
                actions.append(ActionItem(
                    id="2",
                    priority=Severity.HIGH,
                    department="Quality Control",
                    action="Review manufacturing processes and implement stricter quality checks",
                    impact="Improve product quality ratings by 15-25%",
                    timeframe="4-6 weeks",
                ))
            else:
                actions.append(ActionItem(
                    id="2",
                    priority=Severity.MEDIUM,
                    department="Quality Control",
                    action="Continue quality monitoring and gather detailed customer feedback",
                    impact="Maintain high quality standards and prevent issues",
                    timeframe="2-3 weeks",
                ))

        if _has(text, "service", "support") and _has(text, "poor", "bad", "rude"):
            actions.append(ActionItem(
                id="3",
                priority=Severity.MEDIUM,
                department="Customer Support",
                action="Implement customer service training program and response protocols",
                impact="Improve customer service ratings by 20-30%",
                timeframe="3-4 weeks",
            ))

        if _has(text, "expensive", "overpriced"):
            actions.append(ActionItem(
                id="4",
                priority=Severity.MEDIUM,
                department="Marketing",
                action="Review pricing strategy and communicate value proposition better",
                impact="Improve price perception and customer acquisition",
                timeframe="2-3 weeks",
            ))

        if not actions:
            positive = sentiment == Sentiment.POSITIVE
            priority = {
                Sentiment.POSITIVE: Severity.LOW,
                Sentiment.NEGATIVE: Severity.HIGH,
                Sentiment.NEUTRAL: Severity.MEDIUM,
            }[sentiment]
            actions.append(ActionItem(
                id="1",
                priority=priority,
                department="Operations",
                action=(
                    "Monitor current performance and identify growth opportunities"
                    if positive
                    else "Conduct comprehensive review of customer touchpoints and pain points"
                ),
                impact=(
                    "Maintain satisfaction levels and identify expansion areas"
                    if positive
                    else "Address key issues affecting customer experience and retention"
                ),
                timeframe="1-2 weeks" if positive else "2-4 weeks",
            ))

        return actions[:MAX_ACTION_ITEMS]

    def sentiment_trend(self) -> list[SentimentTrendPoint]:
        """Four weekly points drifting toward positive."""
        return [
            SentimentTrendPoint(
                period=period,
                positive=positive + randint(self.rng, 0, positive_spread - 1),
                negative=negative + randint(self.rng, 0, negative_spread - 1),
                neutral=TREND_NEUTRAL,
            )
            for period, positive, positive_spread, negative, negative_spread in TREND_SHAPE
        ]

    def top_concerns(self, text: str) -> list[Concern]:
        """Ordered problem checks; two low-severity defaults when none match."""
        concerns: list[Concern] = []

        if "delivery" in text and _has(text, "slow", "delayed", "late"):
            concerns.append(Concern("Delivery Delays", randint(self.rng, 15, 34), Severity.HIGH))

        if "quality" in text and _has(text, "poor", "bad", "cheap"):
            concerns.append(Concern("Product Quality Issues", randint(self.rng, 10, 24), Severity.MEDIUM))

        if _has(text, "size", "fit", "different"):
            concerns.append(Concern("Size or Description Accuracy", randint(self.rng, 8, 19), Severity.MEDIUM))

        if "packaging" in text and _has(text, "damaged", "poor", "broken"):
            concerns.append(Concern("Packaging and Shipping Damage", randint(self.rng, 5, 14), Severity.LOW))

        if "service" in text and _has(text, "poor", "rude", "unhelpful"):
            concerns.append(Concern("Customer Service Experience", randint(self.rng, 6, 13), Severity.MEDIUM))

        if not concerns:
            concerns = [
                Concern("Communication Clarity", 7, Severity.LOW),
                Concern("Website User Experience", 5, Severity.LOW),
            ]

        return concerns[:MAX_CONCERNS]

    def strengths(self, text: str, sentiment: Sentiment) -> list[Strength]:
        """Exactly four aspects with sentiment- and keyword-adjusted ratings."""
        base = STRENGTH_BASE_RATING[sentiment]

        def strength(aspect: str, offset: float, spread: float, low: int, high: int) -> Strength:
            return Strength(
                aspect=aspect,
                rating=round1(base + offset + self.rng.random() * spread),
                mentions=randint(self.rng, low, high),
            )

        if "quality" in text and sentiment == Sentiment.POSITIVE:
            quality = strength("Product Quality", 0.2, 0.3, 65, 99)
        else:
            quality = strength("Product Quality", 0.0, 0.2, 45, 69)

        if _has(text, "value", "worth", "price"):
            value = strength("Value for Money", -0.1, 0.3, 50, 79)
        else:
            value = strength("Value for Money", -0.05, 0.2, 40, 59)

        if "service" in text and _has(text, "good", "helpful", "excellent"):
            service = strength("Customer Service", 0.1, 0.3, 40, 64)
        else:
            service = strength("Customer Service", 0.0, 0.2, 30, 49)

        delivery = strength("Delivery Experience", 0.0, 0.25, 35, 64)

        return [quality, value, service, delivery]
