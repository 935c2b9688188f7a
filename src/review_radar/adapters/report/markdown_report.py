"""Markdown insight report generator."""

from review_radar.core.entities import InsightReport, ReviewCluster
from review_radar.core.interfaces import ReportGenerator


class MarkdownReportGenerator(ReportGenerator):
    """Generate a markdown report from an insight report."""

    async def generate(self, report: InsightReport) -> str:
        """Generate markdown report."""
        summary = report.analysis.summary
        lines = [
            f"# 📊 Review Insights: {report.source_label}",
            "",
            f"*Generated {report.generated_at.strftime('%d.%m.%Y %H:%M')}*",
            "",
            f"**Rating:** {summary.rating:.1f} ⭐ | "
            f"**Reviews:** {summary.review_count} | "
            f"**Sentiment:** {summary.sentiment.value} | "
            f"**Trust score:** {summary.trust_score}%",
            "",
        ]

        if report.scraping:
            info = report.scraping.product_info
            lines.extend([
                f"**Product:** {info.name} ({report.scraping.platform.value}, "
                f"{info.total_reviews} reviews, {info.rating:.1f} ⭐)",
                "",
            ])

        lines.extend(["## 💡 Key Insights", ""])
        lines.extend(f"- {insight}" for insight in summary.key_insights)
        lines.append("")

        if report.fix_clusters:
            lines.extend(["## 🔴 Fix", ""])
            for cluster in report.fix_clusters:
                lines.extend(self._format_cluster(cluster))

        if report.keep_clusters:
            lines.extend(["## 🟢 Keep", ""])
            for cluster in report.keep_clusters:
                lines.extend(self._format_cluster(cluster))

        lines.extend(["## ✅ Action Items", ""])
        for item in report.analysis.action_items:
            lines.append(
                f"- **[{item.priority.value}] {item.department}:** {item.action} "
                f"({item.timeframe}): {item.impact}"
            )
        lines.append("")

        lines.extend(["## ⚠️ Top Concerns", ""])
        for concern in report.analysis.top_concerns:
            lines.append(f"- {concern.issue}: {concern.mentions} mentions ({concern.severity.value})")
        lines.append("")

        lines.extend(["## 💪 Strengths", ""])
        for strength in report.analysis.strengths:
            lines.append(f"- {strength.aspect}: {strength.rating:.1f} ⭐ ({strength.mentions} mentions)")
        lines.append("")

        lines.extend([
            "## 📈 Sentiment Trend",
            "",
            "| Period | Positive | Negative | Neutral |",
            "|---|---|---|---|",
        ])
        for point in report.analysis.sentiment_trend:
            lines.append(f"| {point.period} | {point.positive}% | {point.negative}% | {point.neutral}% |")
        lines.append("")

        return "\n".join(lines)

    def _format_cluster(self, cluster: ReviewCluster) -> list[str]:
        """Format single cluster."""
        lines = [
            f"### {cluster.theme.value}",
            "",
            cluster.insight,
            "",
            f"**Rating:** {cluster.rating:.1f} | "
            f"**Urgency:** {cluster.urgency_level.value} | "
            f"**Impact:** {cluster.impact_score:.1f}/10 | "
            f"**Reviews:** {cluster.review_count}",
            "",
        ]

        for rec in cluster.recommendations:
            lines.extend([
                f"**{rec.action}** ({rec.priority.value}, {rec.timeframe})",
                "",
                f"*Expected impact:* {rec.expected_impact}",
                "",
            ])
            for number, step in enumerate(rec.implementation_steps, 1):
                lines.append(f"{number}. {step}")
            lines.append("")

        if cluster.samples:
            sample = cluster.samples[0]
            lines.extend([
                f"> {sample.text}",
                f"> — {sample.reviewer}, {sample.source} ({sample.rating}/5)",
                "",
            ])

        lines.append("---")
        lines.append("")

        return lines
