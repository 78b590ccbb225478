"""
Quick-Win Detector

Finds keywords ranking just below the top-3 CTR band (positions 4-10 by
default) where a modest ranking push produces an outsized click gain.

Formula:
    Click_Uplift = round(Volume × (CTR(target) - CTR(position)))

Effort is read from the distance to the target position:
    gap ≤ 3 → low, gap ≤ 7 → medium, else high
"""

import logging
from typing import Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    QuickWinOpportunity,
    RankedKeywordRecord,
    Tier,
)
from ..scoring.helpers import estimate_traffic_potential, get_ctr_for_position
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _effort_for_gap(gap: int) -> Tier:
    if gap <= 3:
        return Tier.LOW
    if gap <= 7:
        return Tier.MEDIUM
    return Tier.HIGH


def find_quick_wins(
    ranked_keywords: Iterable[RankedKeywordRecord],
    settings: Optional[Settings] = None,
) -> List[QuickWinOpportunity]:
    """
    Detect quick-win keywords.

    Args:
        ranked_keywords: Classified keyword records
        settings: Threshold overrides (default: environment settings)

    Returns:
        Quick wins sorted by click uplift desc (ties: volume desc, keyword asc)
    """
    settings = settings or get_settings()
    target = settings.QUICK_WIN_TARGET_POSITION
    target_ctr = get_ctr_for_position(target)

    wins = []
    for kw in ranked_keywords:
        if kw.position is None:
            continue
        if not settings.QUICK_WIN_MIN_POSITION <= kw.position <= settings.QUICK_WIN_MAX_POSITION:
            continue
        if kw.search_volume < settings.QUICK_WIN_MIN_VOLUME:
            continue

        current_clicks = round(kw.search_volume * get_ctr_for_position(kw.position))
        potential_clicks = round(kw.search_volume * target_ctr)
        uplift = estimate_traffic_potential(kw.search_volume, kw.position, target)
        uplift_percentage = round(uplift / current_clicks * 100) if current_clicks > 0 else 0

        wins.append(QuickWinOpportunity(
            keyword=kw.keyword,
            current_position=kw.position,
            target_position=target,
            search_volume=kw.search_volume,
            current_clicks=current_clicks,
            potential_clicks=potential_clicks,
            click_uplift=uplift,
            uplift_percentage=uplift_percentage,
            effort=_effort_for_gap(kw.position - target),
            url=kw.url,
            category=kw.category,
            reasoning=(
                f"Ranking #{kw.position} for '{kw.keyword}' ({kw.search_volume:,} searches/month). "
                f"Moving to #{target} adds ~{uplift:,} clicks/month (+{uplift_percentage}%)."
            ),
        ))

    wins.sort(key=lambda w: (-w.click_uplift, -w.search_volume, w.keyword))
    logger.debug(f"Found {len(wins)} quick wins")
    return wins


def quick_win_candidates(quick_wins: Iterable[QuickWinOpportunity]) -> List[ActionCandidate]:
    """Turn quick wins into optimize actions."""
    candidates = []
    for win in quick_wins:
        # Pages already on the top half of page 1 respond fastest
        time_to_result = Tier.LOW if win.current_position <= 6 else Tier.MEDIUM
        candidates.append(ActionCandidate(
            action_type=ActionType.OPTIMIZE,
            title=f"Push '{win.keyword}' from #{win.current_position} to #{win.target_position}",
            description=(
                f"Strengthen {win.url or 'the ranking page'} with on-page optimization "
                f"and internal links for '{win.keyword}'."
            ),
            reasoning=win.reasoning,
            uplift=win.click_uplift,
            effort=win.effort,
            time_to_result=time_to_result,
            keyword=win.keyword,
            category=win.category,
            source="quick_win",
        ))
    return candidates
