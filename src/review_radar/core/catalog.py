"""Static remediation playbooks keyed by theme and action type."""

from review_radar.core.entities import (
    ActionType,
    Recommendation,
    RecommendationPriority,
    Theme,
)

CRITICAL = RecommendationPriority.CRITICAL
IMPORTANT = RecommendationPriority.IMPORTANT
MODERATE = RecommendationPriority.MODERATE

RECOMMENDATIONS: dict[Theme, dict[ActionType, tuple[Recommendation, ...]]] = {
    Theme.DELIVERY_EXPERIENCE: {
        ActionType.FIX: (
            Recommendation(
                action="Implement Express Shipping Options",
                priority=CRITICAL,
                timeframe="2-4 weeks",
                expected_impact="Reduce delivery complaints by 60-70%",
                implementation_steps=(
                    "Partner with premium logistics providers",
                    "Introduce same-day/next-day delivery options",
                    "Implement real-time tracking system",
                    "Train customer service team on delivery protocols",
                ),
            ),
            Recommendation(
                action="Enhance Packaging Standards",
                priority=IMPORTANT,
                timeframe="1-2 weeks",
                expected_impact="Reduce damage-related complaints by 40-50%",
                implementation_steps=(
                    "Upgrade packaging materials",
                    "Implement quality control checks",
                    "Add fragile item protocols",
                    "Include package handling instructions",
                ),
            ),
        ),
        ActionType.KEEP: (
            Recommendation(
                action="Maintain Current Delivery Excellence",
                priority=IMPORTANT,
                timeframe="Ongoing",
                expected_impact="Sustain high customer satisfaction rates",
                implementation_steps=(
                    "Continue monitoring delivery performance",
                    "Maintain partnerships with reliable couriers",
                    "Regular training for delivery personnel",
                    "Keep transparent tracking system updated",
                ),
            ),
        ),
    },
    Theme.PRODUCT_QUALITY: {
        ActionType.FIX: (
            Recommendation(
                action="Implement Quality Assurance Protocol",
                priority=CRITICAL,
                timeframe="4-6 weeks",
                expected_impact="Improve quality ratings by 40-60%",
                implementation_steps=(
                    "Establish multi-stage quality checks",
                    "Implement supplier audit system",
                    "Create defect tracking database",
                    "Develop quality metrics dashboard",
                ),
            ),
            Recommendation(
                action="Enhance Product Documentation",
                priority=MODERATE,
                timeframe="2-3 weeks",
                expected_impact="Reduce quality-related returns by 25-35%",
                implementation_steps=(
                    "Update product descriptions with detailed specs",
                    "Add high-quality product images",
                    "Include material composition details",
                    "Provide care and usage instructions",
                ),
            ),
        ),
        ActionType.KEEP: (
            Recommendation(
                action="Leverage Quality as Competitive Advantage",
                priority=IMPORTANT,
                timeframe="Ongoing",
                expected_impact="Increase premium positioning and pricing power",
                implementation_steps=(
                    "Highlight quality certifications in marketing",
                    "Develop quality guarantee programs",
                    "Create customer testimonial campaigns",
                    "Expand into premium product categories",
                ),
            ),
        ),
    },
    Theme.CUSTOMER_SERVICE: {
        ActionType.FIX: (
            Recommendation(
                action="Deploy AI-Powered Support System",
                priority=CRITICAL,
                timeframe="6-8 weeks",
                expected_impact="Reduce response time by 70-80%",
                implementation_steps=(
                    "Implement chatbot for common queries",
                    "Create comprehensive FAQ database",
                    "Train support team on escalation protocols",
                    "Establish 24/7 support availability",
                ),
            ),
            Recommendation(
                action="Develop Proactive Support Strategy",
                priority=IMPORTANT,
                timeframe="3-4 weeks",
                expected_impact="Increase customer satisfaction by 45-55%",
                implementation_steps=(
                    "Monitor social media for customer issues",
                    "Send proactive order updates",
                    "Implement feedback collection system",
                    "Create customer success team",
                ),
            ),
        ),
        ActionType.KEEP: (
            Recommendation(
                action="Scale Excellent Service Model",
                priority=IMPORTANT,
                timeframe="Ongoing",
                expected_impact="Build strong customer loyalty and referrals",
                implementation_steps=(
                    "Document current best practices",
                    "Scale training programs",
                    "Implement service quality monitoring",
                    "Develop customer loyalty programs",
                ),
            ),
        ),
    },
    Theme.VALUE_FOR_MONEY: {
        ActionType.FIX: (
            Recommendation(
                action="Optimize Pricing Strategy",
                priority=CRITICAL,
                timeframe="4-6 weeks",
                expected_impact="Improve value perception by 35-45%",
                implementation_steps=(
                    "Conduct competitive pricing analysis",
                    "Introduce tiered pricing options",
                    "Develop bundle offers and discounts",
                    "Create value communication strategy",
                ),
            ),
            Recommendation(
                action="Enhance Value Proposition",
                priority=IMPORTANT,
                timeframe="2-3 weeks",
                expected_impact="Increase conversion rates by 20-30%",
                implementation_steps=(
                    "Highlight unique product features",
                    "Add warranty and guarantee options",
                    "Include free shipping thresholds",
                    "Develop comparison tools with competitors",
                ),
            ),
        ),
        ActionType.KEEP: (
            Recommendation(
                action="Capitalize on Value Leadership",
                priority=IMPORTANT,
                timeframe="Ongoing",
                expected_impact="Strengthen market position and increase market share",
                implementation_steps=(
                    "Develop value-focused marketing campaigns",
                    "Introduce referral incentive programs",
                    "Expand product line with similar value proposition",
                    "Monitor and maintain competitive pricing",
                ),
            ),
        ),
    },
}


class RecommendationCatalog:
    """Read-only lookup over a theme x action-type playbook table."""

    def __init__(
        self,
        table: dict[Theme, dict[ActionType, tuple[Recommendation, ...]]] = RECOMMENDATIONS,
    ) -> None:
        self._table = table

    def lookup(self, theme: Theme, action_type: ActionType) -> list[Recommendation]:
        """Playbooks for a cell; empty when the cell is absent."""
        return list(self._table.get(theme, {}).get(action_type, ()))

    def cells(self) -> list[tuple[Theme, ActionType]]:
        """All (theme, action_type) keys present in the table."""
        return [
            (theme, action_type)
            for theme, by_action in self._table.items()
            for action_type in by_action
        ]
