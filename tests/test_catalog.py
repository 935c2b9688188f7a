"""Tests for the recommendation catalog."""

from review_radar.core import ActionType, Recommendation, RecommendationCatalog, RecommendationPriority, Theme


def test_catalog_covers_every_cell() -> None:
    """Test all theme and action combinations have playbooks."""
    catalog = RecommendationCatalog()

    assert len(catalog.cells()) == len(Theme) * len(ActionType)
    for theme in Theme:
        assert len(catalog.lookup(theme, ActionType.FIX)) == 2
        assert len(catalog.lookup(theme, ActionType.KEEP)) == 1


def test_catalog_entries_have_steps() -> None:
    """Test every playbook carries implementation steps."""
    catalog = RecommendationCatalog()

    for theme, action_type in catalog.cells():
        for rec in catalog.lookup(theme, action_type):
            assert rec.action
            assert rec.implementation_steps


def test_catalog_lookup() -> None:
    """Test lookup returns the expected playbook."""
    recs = RecommendationCatalog().lookup(Theme.DELIVERY_EXPERIENCE, ActionType.FIX)
    assert recs[0].action == "Implement Express Shipping Options"


def test_catalog_missing_cell() -> None:
    """Test absent cells yield an empty list."""
    rec = Recommendation(
        action="Do it",
        priority=RecommendationPriority.MODERATE,
        timeframe="1 week",
        expected_impact="Some",
        implementation_steps=("Step",),
    )
    catalog = RecommendationCatalog({Theme.PRODUCT_QUALITY: {ActionType.FIX: (rec,)}})

    assert catalog.lookup(Theme.PRODUCT_QUALITY, ActionType.FIX) == [rec]
    assert catalog.lookup(Theme.PRODUCT_QUALITY, ActionType.KEEP) == []
    assert catalog.lookup(Theme.CUSTOMER_SERVICE, ActionType.FIX) == []
