"""Tests for markdown report generation."""

from datetime import datetime

import pytest

from conftest import FixedRandom

from review_radar.adapters.report import MarkdownReportGenerator
from review_radar.core import (
    InsightReport,
    InsightSynthesizer,
    Platform,
    ProductInfo,
    RecommendationCatalog,
    ScrapingResult,
)

TEXT = "Delivery was slow but the product is excellent and great value for money"


def _report(scraping: ScrapingResult = None) -> InsightReport:
    synthesizer = InsightSynthesizer(RecommendationCatalog(), FixedRandom([0.0]))
    return InsightReport(
        source_label="Kettle (Amazon)",
        clusters=synthesizer.build_clusters(TEXT),
        analysis=synthesizer.build_analysis(TEXT),
        scraping=scraping,
        generated_at=datetime(2024, 3, 1, 12, 30),
    )


@pytest.mark.asyncio
async def test_generate_sections() -> None:
    """Test report contains every section in order."""
    markdown = await MarkdownReportGenerator().generate(_report())

    assert markdown.startswith("# 📊 Review Insights: Kettle (Amazon)")
    assert "*Generated 01.03.2024 12:30*" in markdown

    headings = [
        "## 💡 Key Insights",
        "## 🔴 Fix",
        "## 🟢 Keep",
        "## ✅ Action Items",
        "## ⚠️ Top Concerns",
        "## 💪 Strengths",
        "## 📈 Sentiment Trend",
    ]
    positions = [markdown.index(heading) for heading in headings]
    assert positions == sorted(positions)


@pytest.mark.asyncio
async def test_generate_clusters() -> None:
    """Test clusters are grouped with their playbooks."""
    markdown = await MarkdownReportGenerator().generate(_report())

    fix_section = markdown.split("## 🔴 Fix")[1].split("## 🟢 Keep")[0]
    keep_section = markdown.split("## 🟢 Keep")[1].split("## ✅ Action Items")[0]

    assert "### Delivery Experience" in fix_section
    assert "**Implement Express Shipping Options**" in fix_section
    assert "**Urgency:** High" in fix_section
    assert "### Value for Money" in keep_section
    assert "1. " in keep_section


@pytest.mark.asyncio
async def test_generate_product_line() -> None:
    """Test acquisition details appear when present."""
    scraping = ScrapingResult(
        review_text=TEXT,
        platform=Platform.AMAZON,
        product_info=ProductInfo(name="Kettle", rating=4.3, total_reviews=150),
    )

    markdown = await MarkdownReportGenerator().generate(_report(scraping))

    assert "**Product:** Kettle (Amazon, 150 reviews, 4.3 ⭐)" in markdown


@pytest.mark.asyncio
async def test_generate_trend_table() -> None:
    """Test sentiment trend is rendered as a table."""
    markdown = await MarkdownReportGenerator().generate(_report())

    assert "| Week 1 | 65% | 25% | 10% |" in markdown
    assert "| Week 4 | 73% | 19% | 10% |" in markdown


@pytest.mark.asyncio
async def test_generate_action_items() -> None:
    """Test action items list department, timeframe and impact."""
    markdown = await MarkdownReportGenerator().generate(_report())

    assert (
        "- **[high] Logistics:** Partner with faster delivery services and optimize "
        "shipping routes (2-4 weeks): Reduce delivery complaints by 30-40% and improve "
        "satisfaction"
    ) in markdown
