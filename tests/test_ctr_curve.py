"""
Test Suite for the CTR Curve and Scoring Helpers
"""

import pytest

from searchshare.scoring.helpers import (
    CTR_CURVE,
    MAX_VISIBLE_POSITION,
    estimate_traffic_potential,
    get_ctr_for_position,
    percentile,
    share,
)


class TestCtrCurve:
    """Test CTR lookup by SERP position."""

    def test_first_page_table(self):
        """Positions 1-10 come straight from the table."""
        assert get_ctr_for_position(1) == 0.28
        assert get_ctr_for_position(3) == 0.09
        assert get_ctr_for_position(4) == 0.06
        assert get_ctr_for_position(10) == 0.015
        assert len(CTR_CURVE) == 10

    def test_second_page_taper(self):
        """Positions 11-20 taper linearly from 1% to 0.55%."""
        assert get_ctr_for_position(11) == 0.01
        assert get_ctr_for_position(15) == 0.008
        assert get_ctr_for_position(20) == 0.0055

    def test_invisible_positions(self):
        """Page 3+, missing and non-positive positions have no CTR."""
        assert get_ctr_for_position(21) == 0.0
        assert get_ctr_for_position(100) == 0.0
        assert get_ctr_for_position(None) == 0.0
        assert get_ctr_for_position(0) == 0.0
        assert get_ctr_for_position(-3) == 0.0

    def test_strictly_decreasing_then_zero(self):
        """CTR strictly decreases over 1..20 and is 0 afterwards."""
        ctrs = [get_ctr_for_position(p) for p in range(1, MAX_VISIBLE_POSITION + 1)]
        assert all(a > b for a, b in zip(ctrs, ctrs[1:]))
        assert ctrs[-1] > 0
        assert all(get_ctr_for_position(p) == 0.0 for p in range(21, 60))

    def test_probabilities(self):
        """Every CTR is a probability."""
        for p in range(-5, 120):
            assert 0.0 <= get_ctr_for_position(p) <= 1.0


class TestHelpers:
    """Test numeric helper functions."""

    def test_traffic_potential(self):
        """Moving naturkosmetik from #4 to #3 gains 666 clicks."""
        assert estimate_traffic_potential(22200, 4, 3) == 666

    def test_traffic_potential_never_negative(self):
        assert estimate_traffic_potential(1000, 1, 3) == 0

    def test_share_rounding(self):
        assert share(13880, 81680) == 17.0
        assert share(1, 3) == 33.3

    def test_share_zero_total(self):
        assert share(0, 0) == 0.0
        assert share(10, 0) == 0.0

    @pytest.mark.parametrize("p,expected", [(0, 1), (50, 3), (100, 5), (75, 4)])
    def test_percentile(self, p, expected):
        assert percentile([5, 1, 3, 2, 4], p) == expected

    def test_percentile_interpolates(self):
        assert percentile([10, 20], 50) == 15

    def test_percentile_empty(self):
        assert percentile([], 75) == 0.0
