"""
Hidden-Gem Detector

High-demand keywords where the brand is invisible: either not ranking at
all or buried beyond page 2. "High demand" is relative to the keyword set
being analysed (75th volume percentile by default) with an absolute floor,
so a small niche dataset still surfaces its biggest terms.
"""

import logging
from typing import Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    HiddenGem,
    HiddenGemType,
    RankedKeywordRecord,
    Tier,
)
from ..scoring.helpers import get_ctr_for_position, percentile
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Beyond this position a page is effectively absent
FIRST_MOVER_POSITION = 50


def find_hidden_gems(
    ranked_keywords: Iterable[RankedKeywordRecord],
    settings: Optional[Settings] = None,
) -> List[HiddenGem]:
    """
    Detect hidden gems.

    Args:
        ranked_keywords: Classified keyword records
        settings: Threshold overrides (default: environment settings)

    Returns:
        Hidden gems sorted by potential clicks desc, capped at HIDDEN_GEM_LIMIT
    """
    settings = settings or get_settings()
    keywords = list(ranked_keywords)
    if not keywords:
        return []

    threshold = max(
        percentile([kw.search_volume for kw in keywords], settings.HIDDEN_GEM_VOLUME_PERCENTILE),
        settings.HIDDEN_GEM_MIN_VOLUME,
    )
    baseline = settings.HIDDEN_GEM_BASELINE_POSITION
    baseline_ctr = get_ctr_for_position(baseline)

    gems = []
    for kw in keywords:
        if kw.search_volume < threshold:
            continue
        if kw.position is not None and kw.position <= settings.HIDDEN_GEM_INVISIBLE_POSITION:
            continue

        if kw.position is None or kw.position > FIRST_MOVER_POSITION:
            opportunity = HiddenGemType.FIRST_MOVER
            where = "not ranking" if kw.position is None else f"ranking #{kw.position}"
            reasoning = (
                f"'{kw.keyword}' has {kw.search_volume:,} searches/month and the brand is {where}. "
                f"New content could claim this demand early."
            )
        else:
            opportunity = HiddenGemType.BURIED
            reasoning = (
                f"'{kw.keyword}' has {kw.search_volume:,} searches/month but is buried at #{kw.position}. "
                f"Reworking the existing page could lift it to page 1."
            )

        potential = round(kw.search_volume * baseline_ctr)
        reasoning += f" Reaching #{baseline} is worth ~{potential:,} clicks/month."

        gems.append(HiddenGem(
            keyword=kw.keyword,
            search_volume=kw.search_volume,
            position=kw.position,
            opportunity=opportunity,
            potential_clicks=potential,
            url=kw.url,
            category=kw.category,
            reasoning=reasoning,
        ))

    gems.sort(key=lambda g: (-g.potential_clicks, g.keyword))
    logger.debug(f"Found {len(gems)} hidden gems above volume {threshold:.0f}")
    return gems[:settings.HIDDEN_GEM_LIMIT]


def hidden_gem_candidates(hidden_gems: Iterable[HiddenGem]) -> List[ActionCandidate]:
    """Turn hidden gems into create actions."""
    candidates = []
    for gem in hidden_gems:
        first_mover = gem.opportunity == HiddenGemType.FIRST_MOVER
        candidates.append(ActionCandidate(
            action_type=ActionType.CREATE,
            title=(
                f"Create content for '{gem.keyword}'" if first_mover
                else f"Rework the page ranking #{gem.position} for '{gem.keyword}'"
            ),
            description=(
                f"Build a dedicated page targeting '{gem.keyword}' and its close variants."
                if first_mover
                else f"Expand and re-target {gem.url or 'the existing page'} to reach page 1."
            ),
            reasoning=gem.reasoning,
            uplift=gem.potential_clicks,
            effort=Tier.HIGH if first_mover else Tier.MEDIUM,
            time_to_result=Tier.HIGH,
            keyword=gem.keyword,
            category=gem.category,
            source="hidden_gem",
        ))
    return candidates
