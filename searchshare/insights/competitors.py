"""
Competitor Strength Estimator

Puts each competitor's share of branded search next to how well the brand
itself ranks on generic (non-branded) terms. Competitor shares are taken
over all tracked brands, so they need not add up to 100 on their own.

Generic keywords are bucketed by the brand's position:
    strong   1-3
    moderate 4-10
    weak     11+ or not ranking
"""

import logging
from typing import Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    BrandVolumeRecord,
    CompetitorStrength,
    RankedKeywordRecord,
    Tier,
)
from ..scoring.helpers import share
from ..scoring.metrics import calculate_sos, dedupe_brand_volumes
from ..utils.text import contains_any

logger = logging.getLogger(__name__)


def _bucket_counts(keywords: List[RankedKeywordRecord]):
    strong = moderate = weak = 0
    for kw in keywords:
        if kw.position is not None and kw.position <= 3:
            strong += 1
        elif kw.position is not None and kw.position <= 10:
            moderate += 1
        else:
            weak += 1
    return strong, moderate, weak


def estimate_competitor_strength(
    brand_volumes: Iterable[BrandVolumeRecord],
    ranked_keywords: Iterable[RankedKeywordRecord],
    own_share: Optional[float] = None,
) -> List[CompetitorStrength]:
    """
    Estimate competitor strength.

    Args:
        brand_volumes: Own and competitor brand volumes
        ranked_keywords: Classified keyword records
        own_share: Own Share of Search (computed from brand_volumes if omitted)

    Returns:
        One entry per competitor, sorted by estimated share desc
    """
    brands = dedupe_brand_volumes(brand_volumes)
    if own_share is None:
        own_share = calculate_sos(brands).share_of_search

    total_volume = sum(b.search_volume for b in brands)
    competitors = [b for b in brands if not b.is_own_brand]
    competitor_labels = [c.brand_label for c in competitors]

    generic = [
        kw for kw in ranked_keywords
        if not kw.is_branded and not contains_any(kw.keyword, competitor_labels)
    ]
    strong, moderate, weak = _bucket_counts(generic)

    results = []
    for competitor in competitors:
        estimated_share = share(competitor.search_volume, total_volume)
        results.append(CompetitorStrength(
            competitor_label=competitor.brand_label,
            brand_search_volume=competitor.search_volume,
            estimated_share_of_search=estimated_share,
            strong_keywords=strong,
            moderate_keywords=moderate,
            weak_keywords=weak,
            keywords_analyzed=len(generic),
            share_vs_own=round(estimated_share - own_share, 1),
        ))

    results.sort(key=lambda c: (-c.estimated_share_of_search, c.competitor_label))
    logger.debug(f"Estimated strength for {len(results)} competitors over {len(generic)} generic keywords")
    return results


def competitor_candidates(
    strengths: Iterable[CompetitorStrength],
    own_share: float,
) -> List[ActionCandidate]:
    """Investigate actions for competitors out-searching the brand."""
    candidates = []
    for competitor in strengths:
        if competitor.estimated_share_of_search <= own_share:
            continue
        candidates.append(ActionCandidate(
            action_type=ActionType.INVESTIGATE,
            title=f"Analyze {competitor.competitor_label}'s search strategy",
            description=(
                f"Review which topics and pages drive demand for {competitor.competitor_label} "
                f"and where they outrank you on generic terms."
            ),
            reasoning=(
                f"{competitor.competitor_label} holds {competitor.estimated_share_of_search}% share of search, "
                f"{competitor.share_vs_own} points ahead of your {own_share}%."
            ),
            uplift=0,
            effort=Tier.LOW,
            time_to_result=Tier.LOW,
            source="competitor",
        ))
    return candidates
