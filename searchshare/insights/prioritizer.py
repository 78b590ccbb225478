"""
Action Prioritizer

Merges the candidates of every detector into one globally ranked action
list with a single comparable score.

Formula:
    Priority_Score = (
        Impact × 0.35 +
        (100 - Effort) × 0.25 +
        Strategic_Fit × 0.20 +
        (100 - Time_To_Result) × 0.20
    )

Impact is the candidate's click uplift relative to the largest uplift in
the run (0-100). Effort and Time-To-Result tiers map to 20/60/100, and
Strategic Fit comes from the action type.
"""

import logging
from typing import Dict, Iterable, List

from ..models import ActionCandidate, ActionItem, ActionType, Tier

logger = logging.getLogger(__name__)

# Score weights (must sum to 1.0)
IMPACT_WEIGHT = 0.35
EFFORT_WEIGHT = 0.25
STRATEGIC_FIT_WEIGHT = 0.20
TIME_TO_RESULT_WEIGHT = 0.20

TIER_SCORES: Dict[Tier, int] = {
    Tier.LOW: 20,
    Tier.MEDIUM: 60,
    Tier.HIGH: 100,
}

STRATEGIC_FIT: Dict[ActionType, int] = {
    ActionType.OPTIMIZE: 90,
    ActionType.CREATE: 70,
    ActionType.INVESTIGATE: 50,
    ActionType.MONITOR: 30,
}


def impact_tier(impact: float) -> Tier:
    """Map a 0-100 impact score to a tier."""
    if impact >= 66:
        return Tier.HIGH
    if impact >= 33:
        return Tier.MEDIUM
    return Tier.LOW


def score_candidate(candidate: ActionCandidate, max_uplift: int) -> int:
    """
    Compute the priority score of one candidate.

    Args:
        candidate: Unscored action
        max_uplift: Largest uplift among all candidates of the run

    Returns:
        Integer score clamped to 0-100
    """
    impact = 100 * max(0, candidate.uplift) / max_uplift if max_uplift > 0 else 0.0
    raw = (
        impact * IMPACT_WEIGHT
        + (100 - TIER_SCORES[candidate.effort]) * EFFORT_WEIGHT
        + STRATEGIC_FIT[candidate.action_type] * STRATEGIC_FIT_WEIGHT
        + (100 - TIER_SCORES[candidate.time_to_result]) * TIME_TO_RESULT_WEIGHT
    )
    return max(0, min(100, round(raw)))


def prioritize_actions(candidates: Iterable[ActionCandidate]) -> List[ActionItem]:
    """
    Score and rank action candidates.

    Returns:
        Action items sorted by priority desc (ties: uplift desc, title asc),
        with ids ``action-1``, ``action-2``, ... in rank order
    """
    candidates = list(candidates)
    if not candidates:
        return []

    max_uplift = max(max(c.uplift for c in candidates), 0)

    scored = []
    for candidate in candidates:
        uplift = max(0, candidate.uplift)
        impact = 100 * uplift / max_uplift if max_uplift > 0 else 0.0
        scored.append((score_candidate(candidate, max_uplift), uplift, impact, candidate))

    scored.sort(key=lambda s: (-s[0], -s[1], s[3].title))

    actions = []
    for rank, (score, uplift, impact, candidate) in enumerate(scored, start=1):
        actions.append(ActionItem(
            id=f"action-{rank}",
            action_type=candidate.action_type,
            title=candidate.title,
            description=candidate.description,
            reasoning=candidate.reasoning,
            impact=impact_tier(impact),
            effort=candidate.effort,
            priority_score=score,
            estimated_click_uplift=uplift,
            keyword=candidate.keyword,
            category=candidate.category,
        ))

    logger.debug(f"Prioritized {len(actions)} actions")
    return actions
