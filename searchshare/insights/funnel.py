"""
Funnel Stage Analysis

Splits the tracked keywords by marketing funnel stage (derived from search
intent) and reports the brand's visibility in each:

    awareness      informational  "wie wirkt retinol"
    consideration  commercial     "beste sonnencreme"
    decision       transactional  "sonnencreme kaufen"
    retention      navigational   "lavera kontakt"

Awareness is always reported, since it is where unmodified keywords land;
the other stages only when they hold keywords.

Formula:
    SOV = Σ round(Volume × CTR(position)) / Σ Volume × 100
    Opportunity clicks = round(Volume × CTR(3))
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from ..models import (
    FunnelOpportunity,
    FunnelStage,
    FunnelStageAnalysis,
    RankedKeywordRecord,
)
from ..scoring.helpers import estimate_visible_volume, get_ctr_for_position, share
from .classifier import DEFAULT_INTENT_RULES, INTENT_TO_FUNNEL, CategoryRule, classify_intent

logger = logging.getLogger(__name__)

TOP_KEYWORDS_PER_STAGE = 5
MAX_OPPORTUNITIES_PER_STAGE = 5
OPPORTUNITY_MIN_VOLUME = 100
OPPORTUNITY_TARGET_POSITION = 3

STAGE_INFO = {
    FunnelStage.AWARENESS: (
        "Awareness Stage",
        "Users are researching, learning, or discovering. Focus on brand visibility and educational content.",
    ),
    FunnelStage.CONSIDERATION: (
        "Consideration Stage",
        "Users are comparing options and evaluating. Focus on differentiation and value propositions.",
    ),
    FunnelStage.DECISION: (
        "Decision Stage",
        "Users are ready to buy or convert. Focus on conversion optimization and clear CTAs.",
    ),
    FunnelStage.RETENTION: (
        "Retention Stage",
        "Users are looking for the brand itself. Make sure official pages own these results.",
    ),
}


def _stage_insights(stage: FunnelStage, keywords: List[RankedKeywordRecord]) -> List[str]:
    """Short written takeaways for one stage."""
    if not keywords:
        return [f"No {stage.value} stage keywords detected. Consider creating content for this stage."]

    total_volume = sum(kw.search_volume for kw in keywords)
    positions = [kw.position for kw in keywords if kw.position is not None]
    top3 = sum(1 for p in positions if p <= 3)
    page1 = sum(1 for p in positions if p <= 10)
    count = len(keywords)

    insights = []
    if stage == FunnelStage.AWARENESS:
        insights.append(f"You have {count} awareness keywords with {total_volume:,} total monthly searches")
        avg_position = sum(positions) / len(positions) if positions else 0
        if avg_position > 10:
            insights.append(
                f"Average position #{avg_position:.1f} suggests room for "
                f"improved visibility in educational content"
            )
    elif stage == FunnelStage.CONSIDERATION:
        insights.append(f"{count} commercial keywords detected - users actively comparing options")
        if page1 < count * 0.5:
            insights.append("Less than 50% of consideration keywords are on page 1 - prioritize comparison content")
        insights.append('Create comparison guides and "best of" content to capture users in the evaluation phase')
    elif stage == FunnelStage.DECISION:
        insights.append(f"{count} high-intent transactional keywords with {total_volume:,} monthly searches")
        if top3 < count * 0.3:
            insights.append("Less than 30% in top 3 positions - optimize product/service pages for conversions")
        insights.append("Ensure landing pages have clear CTAs and streamlined purchase paths")
    else:
        insights.append(f"{count} navigational keywords with {total_volume:,} monthly searches")
        if top3 < count:
            insights.append("Not every navigational keyword ranks in the top 3 - check official pages and sitelinks")
    return insights


def _analyze_stage(
    stage: FunnelStage,
    keywords: List[RankedKeywordRecord],
    rules: Sequence[CategoryRule],
) -> FunnelStageAnalysis:
    total_volume = sum(kw.search_volume for kw in keywords)
    visible_volume = sum(round(estimate_visible_volume(kw.search_volume, kw.position)) for kw in keywords)
    positions = [kw.position for kw in keywords if kw.position is not None]
    avg_position = round(sum(positions) / len(positions), 1) if positions else None
    by_volume = sorted(keywords, key=lambda kw: (-kw.search_volume, kw.keyword))

    target_ctr = get_ctr_for_position(OPPORTUNITY_TARGET_POSITION)
    opportunities = [
        FunnelOpportunity(
            keyword=kw.keyword,
            search_volume=kw.search_volume,
            position=kw.position,
            intent=classify_intent(kw.keyword, rules),
            potential_clicks=round(kw.search_volume * target_ctr),
            url=kw.url,
        )
        for kw in by_volume
        if kw.position is not None
        and kw.position > OPPORTUNITY_TARGET_POSITION
        and kw.search_volume >= OPPORTUNITY_MIN_VOLUME
    ][:MAX_OPPORTUNITIES_PER_STAGE]

    label, description = STAGE_INFO[stage]
    return FunnelStageAnalysis(
        stage=stage,
        label=label,
        description=description,
        keyword_count=len(keywords),
        total_volume=total_volume,
        visible_volume=visible_volume,
        share_of_voice=share(visible_volume, total_volume),
        avg_position=avg_position,
        top_keywords=[kw.keyword for kw in by_volume[:TOP_KEYWORDS_PER_STAGE]],
        opportunities=opportunities,
        insights=_stage_insights(stage, keywords),
    )


def analyze_funnel_stages(
    ranked_keywords: Iterable[RankedKeywordRecord],
    rules: Sequence[CategoryRule] = DEFAULT_INTENT_RULES,
) -> List[FunnelStageAnalysis]:
    """
    Break visibility down by funnel stage.

    Args:
        ranked_keywords: Keyword records
        rules: Ordered intent ruleset

    Returns:
        Stage analyses in funnel order (awareness first)
    """
    by_stage: Dict[FunnelStage, List[RankedKeywordRecord]] = defaultdict(list)
    for kw in ranked_keywords:
        by_stage[INTENT_TO_FUNNEL[classify_intent(kw.keyword, rules)]].append(kw)

    analyses = [
        _analyze_stage(stage, by_stage[stage], rules)
        for stage in FunnelStage
        if by_stage[stage] or stage == FunnelStage.AWARENESS
    ]
    logger.debug(f"Funnel stages: {', '.join(f'{a.stage.value}={a.keyword_count}' for a in analyses)}")
    return analyses


def funnel_breakdown(analyses: Iterable[FunnelStageAnalysis]) -> Dict[str, Dict[str, int]]:
    """Keyword count and volume per stage, zero for stages without keywords."""
    breakdown = {stage.value: {"count": 0, "volume": 0} for stage in FunnelStage}
    for analysis in analyses:
        breakdown[analysis.stage.value] = {
            "count": analysis.keyword_count,
            "volume": analysis.total_volume,
        }
    return breakdown
