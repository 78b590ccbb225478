"""
Scoring Module for SearchShare

This module provides the headline visibility metrics:

1. **Share of Search** (0-100)
   Own branded-search demand as a share of all tracked brands.

2. **Share of Voice** (0-100)
   CTR-weighted clicks captured by current rankings, with a per-keyword
   breakdown of visible volume.

3. **Growth Gap**
   SOV - SOS with a growth_potential / balanced / missing_opportunities reading.

Example Usage:
    from searchshare.models import BrandVolumeRecord, RankedKeywordRecord
    from searchshare.scoring import calculate_metrics

    brands = [
        BrandVolumeRecord("lavera", 13880, is_own_brand=True),
        BrandVolumeRecord("weleda", 18100),
    ]
    keywords = [RankedKeywordRecord("naturkosmetik", 22200, position=4)]

    metrics = calculate_metrics(brands, keywords)
    print(f"SOS: {metrics.sos.share_of_search}%")
    print(f"SOV: {metrics.sov.share_of_voice}%")
"""

# Helper utilities and constants
from .helpers import (
    CTR_CURVE,
    MAX_VISIBLE_POSITION,
    get_ctr_for_position,
    estimate_visible_volume,
    estimate_traffic_potential,
    share,
    percentile,
)

# Headline metrics
from .metrics import (
    GAP_THRESHOLD_HIGH,
    GAP_THRESHOLD_LOW,
    dedupe_brand_volumes,
    calculate_sos,
    calculate_sov,
    calculate_growth_gap,
    calculate_metrics,
)

__all__ = [
    # Helpers
    "CTR_CURVE",
    "MAX_VISIBLE_POSITION",
    "get_ctr_for_position",
    "estimate_visible_volume",
    "estimate_traffic_potential",
    "share",
    "percentile",

    # Metrics
    "GAP_THRESHOLD_HIGH",
    "GAP_THRESHOLD_LOW",
    "dedupe_brand_volumes",
    "calculate_sos",
    "calculate_sov",
    "calculate_growth_gap",
    "calculate_metrics",
]
