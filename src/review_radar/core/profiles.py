"""Fixed per-theme constants used when building clusters.

Each theme has an "issue" branch and a "healthy" branch; a cluster takes
every value from exactly one branch, never a blend of the two.
"""

from dataclasses import dataclass

from review_radar.core.entities import SampleReview, Theme, UrgencyLevel


@dataclass(frozen=True)
class Branch:
    insight: str
    rating: float
    impact_score: float
    urgency: UrgencyLevel
    samples: tuple[SampleReview, ...]


@dataclass(frozen=True)
class ThemeProfile:
    id: str
    theme: Theme
    review_count: int
    source: str
    issue: Branch
    healthy: Branch

    def branch(self, has_issue: bool) -> Branch:
        return self.issue if has_issue else self.healthy


def _sample(id: str, text: str, rating: int, reviewer: str, source: str, date: str) -> SampleReview:
    return SampleReview(id=id, text=text, rating=rating, reviewer=reviewer, source=source, date=date)


DELIVERY = ThemeProfile(
    id="1",
    theme=Theme.DELIVERY_EXPERIENCE,
    review_count=89,
    source="Amazon, Flipkart",
    issue=Branch(
        insight="Customers report delays and shipping issues affecting satisfaction",
        rating=3.2,
        impact_score=8.5,
        urgency=UrgencyLevel.HIGH,
        samples=(
            _sample("1", "The product is good but delivery took way too long. Expected it in 2 days, got it in 6 days.",
                    2, "Rajesh Kumar", "Amazon", "2024-01-15"),
            _sample("2", "Late delivery and the package was damaged. Customer service was not helpful either.",
                    1, "Priya Sharma", "Flipkart", "2024-01-14"),
            _sample("3", "Average product but the shipping delay was really frustrating. They need to improve logistics.",
                    3, "Anonymous User", "Amazon", "2024-01-13"),
        ),
    ),
    healthy=Branch(
        insight="Fast delivery times are consistently praised by customers",
        rating=4.6,
        impact_score=9.2,
        urgency=UrgencyLevel.LOW,
        samples=(
            _sample("1", "Super fast delivery! Ordered yesterday and received today. Packaging was excellent too.",
                    5, "Rajesh Kumar", "Amazon", "2024-01-15"),
            _sample("2", "Amazing delivery speed and the product arrived in perfect condition. Very impressed!",
                    5, "Priya Sharma", "Flipkart", "2024-01-14"),
            _sample("3", "Quick delivery as promised. The tracking was accurate and delivery person was courteous.",
                    4, "Anonymous User", "Amazon", "2024-01-13"),
        ),
    ),
)

QUALITY = ThemeProfile(
    id="2",
    theme=Theme.PRODUCT_QUALITY,
    review_count=124,
    source="Amazon, Myntra",
    issue=Branch(
        insight="Quality inconsistencies reported across multiple product batches",
        rating=3.4,
        impact_score=9.1,
        urgency=UrgencyLevel.HIGH,
        samples=(
            _sample("1", "The material feels cheap and the stitching is poor. Not worth the price at all.",
                    2, "Sneha Patel", "Myntra", "2024-01-16"),
            _sample("2", "Product looks different from photos. Quality is below average for this price range.",
                    2, "Arjun Singh", "Amazon", "2024-01-15"),
            _sample("3", "Okay product but quality could be much better. Some defects noticed upon inspection.",
                    3, "Maya Reddy", "Myntra", "2024-01-14"),
        ),
    ),
    healthy=Branch(
        insight="Consistently high product quality exceeding customer expectations",
        rating=4.5,
        impact_score=8.8,
        urgency=UrgencyLevel.MEDIUM,
        samples=(
            _sample("1", "Excellent quality! The material is premium and craftsmanship is top-notch. Highly recommend.",
                    5, "Sneha Patel", "Myntra", "2024-01-16"),
            _sample("2", "Amazing quality! Exactly as described and even better in person. Great value for money.",
                    5, "Arjun Singh", "Amazon", "2024-01-15"),
            _sample("3", "Perfect quality and finish. This brand never disappoints. Will definitely buy again.",
                    5, "Maya Reddy", "Myntra", "2024-01-14"),
        ),
    ),
)

SERVICE = ThemeProfile(
    id="3",
    theme=Theme.CUSTOMER_SERVICE,
    review_count=67,
    source="All Platforms",
    issue=Branch(
        insight="Customer support response times and helpfulness need improvement",
        rating=3.1,
        impact_score=8.9,
        urgency=UrgencyLevel.HIGH,
        samples=(
            _sample("1", "Contacted customer service about defective product. No response for 3 days. Very poor.",
                    1, "Vikram Gupta", "Flipkart", "2024-01-16"),
            _sample("2", "Customer service is unhelpful and rude. They refused to process my legitimate return.",
                    1, "Anita Das", "Amazon", "2024-01-15"),
            _sample("3", "Average customer service. Takes too long to get responses and solutions.",
                    3, "Rahul Joshi", "Myntra", "2024-01-14"),
        ),
    ),
    healthy=Branch(
        insight="Excellent customer service with quick resolution of queries",
        rating=4.4,
        impact_score=9.0,
        urgency=UrgencyLevel.LOW,
        samples=(
            _sample("1", "Outstanding customer service! They resolved my issue within hours. Very professional team.",
                    5, "Vikram Gupta", "Flipkart", "2024-01-16"),
            _sample("2", "Fantastic support team! They went above and beyond to help me. Truly impressed.",
                    5, "Anita Das", "Amazon", "2024-01-15"),
            _sample("3", "Quick and helpful customer service. They made the return process very smooth.",
                    4, "Rahul Joshi", "Myntra", "2024-01-14"),
        ),
    ),
)

VALUE = ThemeProfile(
    id="4",
    theme=Theme.VALUE_FOR_MONEY,
    review_count=95,
    source="Amazon, Flipkart",
    issue=Branch(
        insight="Mixed feedback on pricing with some finding it expensive",
        rating=3.6,
        impact_score=7.8,
        urgency=UrgencyLevel.MEDIUM,
        samples=(
            _sample("1", "Overpriced for the quality offered. You can get better products at this price range.",
                    2, "Deepak Mehta", "Amazon", "2024-01-16"),
            _sample("2", "Product is okay but feels expensive. Similar products available at lower prices elsewhere.",
                    3, "Kavya Iyer", "Flipkart", "2024-01-15"),
            _sample("3", "Price is too high compared to competitors. Need to reconsider pricing strategy.",
                    2, "Suresh Nair", "Amazon", "2024-01-14"),
        ),
    ),
    healthy=Branch(
        insight="Customers consistently praise the value proposition and pricing",
        rating=4.3,
        impact_score=8.6,
        urgency=UrgencyLevel.LOW,
        samples=(
            _sample("1", "Great value for money! Quality is excellent for this price point. Highly satisfied.",
                    5, "Deepak Mehta", "Amazon", "2024-01-16"),
            _sample("2", "Perfect price for the quality received. Excellent deal and great product overall.",
                    4, "Kavya Iyer", "Flipkart", "2024-01-15"),
            _sample("3", "Amazing value! Quality exceeds expectations for this price. Will definitely recommend.",
                    5, "Suresh Nair", "Amazon", "2024-01-14"),
        ),
    ),
)

THEME_PROFILES: tuple[ThemeProfile, ...] = (DELIVERY, QUALITY, SERVICE, VALUE)
