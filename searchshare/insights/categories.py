"""
Category Breakdown

Share of Voice computed per keyword category, with a competitive status:

    leading      SOV ≥ 25% and avg position ≤ 5
    competitive  SOV ≥ 15% or avg position ≤ 8
    trailing     SOV ≥ 8%  or avg position ≤ 12
    weak         everything else
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    CategoryBreakdown,
    CategoryStatus,
    RankedKeywordRecord,
    Tier,
)
from ..scoring.helpers import estimate_visible_volume, share
from .classifier import UNCATEGORIZED

logger = logging.getLogger(__name__)

TOP_KEYWORDS_PER_CATEGORY = 5
MAX_MONITOR_ACTIONS = 2


def category_status(sov: float, avg_position: Optional[float]) -> CategoryStatus:
    """Classify a category from its SOV and average ranked position."""
    ranked = avg_position is not None
    if sov >= 25 and ranked and avg_position <= 5:
        return CategoryStatus.LEADING
    if sov >= 15 or (ranked and avg_position <= 8):
        return CategoryStatus.COMPETITIVE
    if sov >= 8 or (ranked and avg_position <= 12):
        return CategoryStatus.TRAILING
    return CategoryStatus.WEAK


def calculate_category_breakdown(
    ranked_keywords: Iterable[RankedKeywordRecord],
) -> List[CategoryBreakdown]:
    """
    Break Share of Voice down by category.

    Returns:
        One entry per category, sorted by total volume desc
    """
    by_category: Dict[str, List[RankedKeywordRecord]] = defaultdict(list)
    for kw in ranked_keywords:
        by_category[kw.category or UNCATEGORIZED].append(kw)

    breakdown = []
    for category, keywords in by_category.items():
        visible_volume = sum(
            round(estimate_visible_volume(kw.search_volume, kw.position)) for kw in keywords
        )
        total_volume = sum(kw.search_volume for kw in keywords)
        positions = [kw.position for kw in keywords if kw.position is not None]
        avg_position = round(sum(positions) / len(positions), 1) if positions else None
        sov = share(visible_volume, total_volume)
        top = sorted(keywords, key=lambda kw: (-kw.search_volume, kw.keyword))[:TOP_KEYWORDS_PER_CATEGORY]

        breakdown.append(CategoryBreakdown(
            category=category,
            share_of_voice=sov,
            visible_volume=visible_volume,
            total_volume=total_volume,
            keyword_count=len(keywords),
            avg_position=avg_position,
            top_keywords=[kw.keyword for kw in top],
            status=category_status(sov, avg_position),
        ))

    breakdown.sort(key=lambda c: (-c.total_volume, c.category))
    logger.debug(f"Broke down {len(breakdown)} categories")
    return breakdown


def monitor_candidates(breakdown: Iterable[CategoryBreakdown]) -> List[ActionCandidate]:
    """Monitor actions protecting the strongest leading categories."""
    leading = [c for c in breakdown if c.status == CategoryStatus.LEADING]
    return [
        ActionCandidate(
            action_type=ActionType.MONITOR,
            title=f"Protect '{cat.category}' leadership",
            description="Monitor competitor moves in this strong category.",
            reasoning=f"You lead with {cat.share_of_voice}% SOV at average position #{cat.avg_position}.",
            uplift=0,
            effort=Tier.LOW,
            time_to_result=Tier.LOW,
            category=cat.category,
            source="category",
        )
        for cat in leading[:MAX_MONITOR_ACTIONS]
    ]
