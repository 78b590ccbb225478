"""
Headline Metrics Calculator

Computes the three numbers at the top of every brand analysis:

1. **Share of Search (SOS)**
   Own branded-search volume as a share of all tracked brands' volume.

2. **Share of Voice (SOV)**
   CTR-weighted clicks the brand's rankings capture, as a share of the raw
   search volume of the tracked keyword set.

3. **Growth Gap**
   SOV - SOS. Visibility ahead of demand suggests growth potential,
   visibility behind demand suggests missed opportunities.

Formula:
    SOS = own_brand_volume / total_brand_volume × 100
    SOV = Σ(volume × CTR(position)) / Σ volume × 100
    Gap = SOV - SOS
"""

import logging
from typing import Iterable, List

from ..models import (
    BrandVolumeRecord,
    RankedKeywordRecord,
    SOSResult,
    SOVResult,
    GrowthGapResult,
    GrowthInterpretation,
    KeywordVisibility,
    MetricsResult,
)
from ..utils.text import normalize_text
from .helpers import estimate_visible_volume, get_ctr_for_position, share

logger = logging.getLogger(__name__)

# Percentage-point band around zero read as "balanced"
GAP_THRESHOLD_HIGH = 2.0
GAP_THRESHOLD_LOW = -2.0


def dedupe_brand_volumes(brand_volumes: Iterable[BrandVolumeRecord]) -> List[BrandVolumeRecord]:
    """
    Keep one record per brand.

    Brands are matched on their normalized label; the first record wins so
    no brand is counted twice in a denominator.
    """
    seen = set()
    unique = []
    for record in brand_volumes:
        key = normalize_text(record.brand_label) or record.brand_label
        if key in seen:
            logger.warning(f"Duplicate brand record '{record.brand_label}' ignored")
            continue
        seen.add(key)
        unique.append(record)
    return unique


def calculate_sos(brand_volumes: Iterable[BrandVolumeRecord]) -> SOSResult:
    """
    Calculate Share of Search.

    Args:
        brand_volumes: One record per tracked brand (own and competitors)

    Returns:
        SOSResult; share is 0.0 when there is no brand volume at all
    """
    brands = dedupe_brand_volumes(brand_volumes)

    brand_volume = sum(b.search_volume for b in brands if b.is_own_brand)
    total_brand_volume = sum(b.search_volume for b in brands)

    return SOSResult(
        share_of_search=share(brand_volume, total_brand_volume),
        brand_volume=brand_volume,
        total_brand_volume=total_brand_volume,
    )


def calculate_sov(ranked_keywords: Iterable[RankedKeywordRecord]) -> SOVResult:
    """
    Calculate Share of Voice with a per-keyword breakdown.

    Unranked keywords stay in the breakdown with zero visible volume.
    The reported visible volume is the exact sum of the breakdown rows.

    Args:
        ranked_keywords: Tracked keywords with current positions

    Returns:
        SOVResult
    """
    breakdown = []
    for kw in ranked_keywords:
        ctr = get_ctr_for_position(kw.position)
        breakdown.append(KeywordVisibility(
            keyword=kw.keyword,
            search_volume=kw.search_volume,
            position=kw.position,
            ctr=ctr,
            visible_volume=round(estimate_visible_volume(kw.search_volume, kw.position)),
            url=kw.url,
            category=kw.category,
        ))

    visible_volume = sum(k.visible_volume for k in breakdown)
    total_market_volume = sum(k.search_volume for k in breakdown)

    return SOVResult(
        share_of_voice=share(visible_volume, total_market_volume),
        visible_volume=visible_volume,
        total_market_volume=total_market_volume,
        keyword_breakdown=breakdown,
    )


def calculate_growth_gap(sos: float, sov: float) -> GrowthGapResult:
    """
    Calculate the Growth Gap between visibility and demand.

    Args:
        sos: Share of Search (0-100)
        sov: Share of Voice (0-100)

    Returns:
        GrowthGapResult with the gap rounded to one decimal
    """
    gap = round(sov - sos, 1)

    if gap > GAP_THRESHOLD_HIGH:
        interpretation = GrowthInterpretation.GROWTH_POTENTIAL
    elif gap < GAP_THRESHOLD_LOW:
        interpretation = GrowthInterpretation.MISSING_OPPORTUNITIES
    else:
        interpretation = GrowthInterpretation.BALANCED

    return GrowthGapResult(gap=gap, interpretation=interpretation)


def calculate_metrics(
    brand_volumes: Iterable[BrandVolumeRecord],
    ranked_keywords: Iterable[RankedKeywordRecord],
) -> MetricsResult:
    """Calculate SOS, SOV and Growth Gap in one call."""
    sos = calculate_sos(brand_volumes)
    sov = calculate_sov(ranked_keywords)
    gap = calculate_growth_gap(sos.share_of_search, sov.share_of_voice)

    logger.debug(
        f"Metrics: SOS={sos.share_of_search}% SOV={sov.share_of_voice}% "
        f"gap={gap.gap} ({gap.interpretation.value})"
    )
    return MetricsResult(sos=sos, sov=sov, gap=gap)
