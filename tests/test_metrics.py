"""
Test Suite for the Headline Metrics

Tests the three headline formulas:
- Share of Search
- Share of Voice
- Growth Gap
"""

import pytest

from searchshare.models import BrandVolumeRecord, GrowthInterpretation, RankedKeywordRecord
from searchshare.scoring import (
    calculate_growth_gap,
    calculate_metrics,
    calculate_sos,
    calculate_sov,
)


class TestShareOfSearch:
    """Test Share of Search calculation."""

    def test_sample_market(self, brand_volumes):
        """Own 13,880 of 81,680 branded searches = 17.0%."""
        result = calculate_sos(brand_volumes)

        assert result.brand_volume == 13880
        assert result.total_brand_volume == 81680
        assert result.share_of_search == 17.0

    def test_no_volume(self):
        """Zero denominator yields 0, not an error."""
        result = calculate_sos([BrandVolumeRecord("lavera", 0, is_own_brand=True)])
        assert result.share_of_search == 0.0

    def test_empty_input(self):
        result = calculate_sos([])
        assert result.share_of_search == 0.0
        assert result.total_brand_volume == 0

    def test_duplicate_brand_counted_once(self, caplog):
        """Colliding normalized labels keep only the first record."""
        brands = [
            BrandVolumeRecord("Dr. Hauschka", 14800),
            BrandVolumeRecord("dr hauschka", 9999),
            BrandVolumeRecord("lavera", 14800, is_own_brand=True),
        ]
        result = calculate_sos(brands)

        assert result.total_brand_volume == 29600
        assert result.share_of_search == 50.0
        assert "Duplicate brand" in caplog.text


class TestShareOfVoice:
    """Test Share of Voice calculation."""

    def test_single_keyword(self):
        """naturkosmetik: 22,200 searches at #4 = 1,332 visible clicks."""
        result = calculate_sov([
            RankedKeywordRecord("naturkosmetik", 22200, position=4, url="/naturkosmetik"),
        ])

        assert result.visible_volume == 1332
        assert result.total_market_volume == 22200
        assert result.share_of_voice == 6.0
        row = result.keyword_breakdown[0]
        assert row.ctr == 0.06
        assert row.url == "/naturkosmetik"

    def test_breakdown_sums_to_visible_volume(self, ranked_keywords):
        result = calculate_sov(ranked_keywords)

        assert result.visible_volume == sum(k.visible_volume for k in result.keyword_breakdown)
        assert result.total_market_volume == sum(k.search_volume for k in ranked_keywords)

    def test_unranked_keyword_kept_with_zero_visibility(self):
        result = calculate_sov([
            RankedKeywordRecord("sonnencreme", 27100),
            RankedKeywordRecord("mascara", 1000, position=0),
        ])

        assert len(result.keyword_breakdown) == 2
        assert all(k.visible_volume == 0 for k in result.keyword_breakdown)
        assert result.share_of_voice == 0.0

    def test_empty_input(self):
        result = calculate_sov([])
        assert result.share_of_voice == 0.0
        assert result.keyword_breakdown == []


class TestGrowthGap:
    """Test Growth Gap interpretation."""

    @pytest.mark.parametrize("sos,sov,interpretation", [
        (10.0, 20.0, GrowthInterpretation.GROWTH_POTENTIAL),
        (20.0, 10.0, GrowthInterpretation.MISSING_OPPORTUNITIES),
        (15.0, 16.0, GrowthInterpretation.BALANCED),
        (15.0, 17.0, GrowthInterpretation.BALANCED),
        (17.0, 15.0, GrowthInterpretation.BALANCED),
    ])
    def test_interpretation(self, sos, sov, interpretation):
        assert calculate_growth_gap(sos, sov).interpretation == interpretation

    def test_gap_rounded_to_one_decimal(self):
        assert calculate_growth_gap(17.0, 12.33).gap == -4.7

    def test_threshold_applies_to_rounded_gap(self):
        """2.04 rounds to 2.0, which is still balanced."""
        result = calculate_growth_gap(10.0, 12.04)
        assert result.gap == 2.0
        assert result.interpretation == GrowthInterpretation.BALANCED

    def test_idempotent(self):
        assert calculate_growth_gap(17.0, 12.3) == calculate_growth_gap(17.0, 12.3)


class TestCalculateMetrics:
    """Test the combined metrics bundle."""

    def test_bundle(self, brand_volumes, ranked_keywords):
        metrics = calculate_metrics(brand_volumes, ranked_keywords)

        assert metrics.sos.share_of_search == 17.0
        assert metrics.gap.gap == round(metrics.sov.share_of_voice - 17.0, 1)

    def test_to_dict(self, brand_volumes, ranked_keywords):
        data = calculate_metrics(brand_volumes, ranked_keywords).to_dict()

        assert set(data) == {"sos", "sov", "gap"}
        assert data["gap"]["interpretation"] in {"growth_potential", "missing_opportunities", "balanced"}
        assert "keyword_breakdown" in data["sov"]
