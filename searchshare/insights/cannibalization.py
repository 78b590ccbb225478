"""
Cannibalization Detector

Finds search intents where several of the brand's own URLs rank against
each other, splitting authority so none of them reaches its best position.

Keywords are grouped by intent: same category, and token-root similarity
at or above the configured threshold (single-linkage, so "shampoo kaufen"
and "shampoos kaufen" land in one group while "hundeshampoo" stays apart).
A group is only an issue when at least two distinct URLs rank inside it;
one page covering many related keywords is exactly what should happen.

Formula:
    Potential = round(Σ Volume × CTR(best_position))
    Current   = Σ round(Volume × CTR(position))
    Lost      = max(0, Potential - Current)
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    CannibalizationFix,
    CannibalizationIssue,
    CompetingUrl,
    RankedKeywordRecord,
    Tier,
)
from ..scoring.helpers import get_ctr_for_position
from ..utils.config import Settings, get_settings
from ..utils.text import names_overlap, normalize_text, tokenize
from .classifier import UNCATEGORIZED

logger = logging.getLogger(__name__)

# More competing pages than this are merged rather than re-targeted
CONSOLIDATE_URL_COUNT = 3
# Pages ranking this close together serve the same SERP slot
DIFFERENTIATE_POSITION_SPREAD = 5


def same_root(a: str, b: str, min_coverage: float = 0.75) -> bool:
    """
    True if one token contains the other and covers most of it.

    "shampoo"/"shampoos" share a root; "shampoo"/"hundeshampoo" do not,
    since the shorter token is only part of a different compound.
    """
    if not names_overlap(a, b):
        return False
    shorter, longer = sorted((len(normalize_text(a)), len(normalize_text(b))))
    return shorter / longer >= min_coverage


def token_similarity(
    a: str,
    b: str,
    min_token_length: int = 3,
    min_root_coverage: float = 0.75,
) -> float:
    """
    Dice-style similarity of two keywords on token roots.

    A token counts as shared when it has the same root (see ``same_root``)
    as any token of the other keyword, so plurals still match.

    Returns:
        Similarity in [0, 1]
    """
    tokens_a = tokenize(a, min_token_length)
    tokens_b = tokenize(b, min_token_length)
    if not tokens_a or not tokens_b:
        return 1.0 if normalize_text(a) and normalize_text(a) == normalize_text(b) else 0.0

    shared_a = sum(1 for t in tokens_a if any(same_root(t, u, min_root_coverage) for u in tokens_b))
    shared_b = sum(1 for u in tokens_b if any(same_root(u, t, min_root_coverage) for t in tokens_a))
    return (shared_a + shared_b) / (len(tokens_a) + len(tokens_b))


def _group_by_intent(
    keywords: List[RankedKeywordRecord],
    threshold: float,
    min_root_coverage: float,
    min_token_length: int,
) -> List[List[RankedKeywordRecord]]:
    """Single-linkage clustering of one category's keywords."""
    parent = list(range(len(keywords)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for i in range(len(keywords)):
        for j in range(i + 1, len(keywords)):
            similarity = token_similarity(
                keywords[i].keyword, keywords[j].keyword, min_token_length, min_root_coverage,
            )
            if similarity >= threshold:
                parent[find(j)] = find(i)

    groups: Dict[int, List[RankedKeywordRecord]] = defaultdict(list)
    for i, kw in enumerate(keywords):
        groups[find(i)].append(kw)
    return list(groups.values())


def _recommend(competing_urls: List[CompetingUrl]) -> CannibalizationFix:
    if len(competing_urls) > CONSOLIDATE_URL_COUNT:
        return CannibalizationFix.CONSOLIDATE
    positions = [u.best_position for u in competing_urls]
    if max(positions) - min(positions) < DIFFERENTIATE_POSITION_SPREAD:
        return CannibalizationFix.DIFFERENTIATE
    return CannibalizationFix.REDIRECT


def _build_issue(category: str, group: List[RankedKeywordRecord]) -> Optional[CannibalizationIssue]:
    by_url: Dict[str, List[RankedKeywordRecord]] = defaultdict(list)
    for kw in group:
        by_url[kw.url].append(kw)
    if len(by_url) < 2:
        return None

    competing_urls = [
        CompetingUrl(
            url=url,
            best_position=min(kw.position for kw in kws),
            keywords=[kw.keyword for kw in kws],
            visible_volume=sum(round(kw.search_volume * get_ctr_for_position(kw.position)) for kw in kws),
        )
        for url, kws in by_url.items()
    ]
    competing_urls.sort(key=lambda u: (u.best_position, u.url))

    best_position = competing_urls[0].best_position
    total_volume = sum(kw.search_volume for kw in group)
    current = sum(u.visible_volume for u in competing_urls)
    potential = round(total_volume * get_ctr_for_position(best_position))
    intent = max(group, key=lambda kw: (kw.search_volume, -len(kw.keyword))).keyword

    return CannibalizationIssue(
        intent=intent,
        category=category,
        keywords=[kw.keyword for kw in group],
        competing_urls=competing_urls,
        total_volume=total_volume,
        best_position=best_position,
        current_visible_volume=current,
        potential_visible_volume=potential,
        lost_opportunity=max(0, potential - current),
        recommendation=_recommend(competing_urls),
    )


def find_cannibalization(
    ranked_keywords: Iterable[RankedKeywordRecord],
    settings: Optional[Settings] = None,
) -> List[CannibalizationIssue]:
    """
    Detect keyword cannibalization.

    Args:
        ranked_keywords: Classified keyword records
        settings: Threshold overrides (default: environment settings)

    Returns:
        Issues sorted by lost opportunity desc
    """
    settings = settings or get_settings()

    by_category: Dict[str, List[RankedKeywordRecord]] = defaultdict(list)
    for kw in ranked_keywords:
        if kw.position is None or not kw.url:
            continue
        by_category[kw.category or UNCATEGORIZED].append(kw)

    issues = []
    for category, keywords in by_category.items():
        groups = _group_by_intent(
            keywords,
            settings.CANNIBALIZATION_SIMILARITY_THRESHOLD,
            settings.CANNIBALIZATION_MIN_ROOT_COVERAGE,
            settings.CANNIBALIZATION_MIN_TOKEN_LENGTH,
        )
        for group in groups:
            issue = _build_issue(category, group)
            if issue:
                issues.append(issue)

    issues.sort(key=lambda i: (-i.lost_opportunity, -i.total_volume, i.intent))
    logger.debug(f"Found {len(issues)} cannibalization issues")
    return issues


def cannibalization_candidates(issues: Iterable[CannibalizationIssue]) -> List[ActionCandidate]:
    """Turn cannibalization issues into optimize actions."""
    verbs = {
        CannibalizationFix.CONSOLIDATE: "Consolidate",
        CannibalizationFix.DIFFERENTIATE: "Differentiate",
        CannibalizationFix.REDIRECT: "Redirect",
    }
    candidates = []
    for issue in issues:
        primary = issue.competing_urls[0].url
        others = ", ".join(issue.urls[1:])
        if issue.recommendation == CannibalizationFix.CONSOLIDATE:
            description = f"Merge the {len(issue.urls)} competing pages into {primary}."
        elif issue.recommendation == CannibalizationFix.DIFFERENTIATE:
            description = f"Give {primary} and {others} distinct intents, titles and internal anchors."
        else:
            description = f"301-redirect {others} to {primary}."

        candidates.append(ActionCandidate(
            action_type=ActionType.OPTIMIZE,
            title=f"{verbs[issue.recommendation]} pages competing for '{issue.intent}'",
            description=description,
            reasoning=(
                f"{len(issue.urls)} URLs rank for '{issue.intent}' ({issue.total_volume:,} searches/month). "
                f"Focusing them on #{issue.best_position} recovers ~{issue.lost_opportunity:,} clicks/month."
            ),
            uplift=issue.lost_opportunity,
            effort=Tier.LOW if issue.recommendation == CannibalizationFix.REDIRECT else Tier.MEDIUM,
            time_to_result=Tier.MEDIUM,
            keyword=issue.intent,
            category=issue.category,
            source="cannibalization",
        ))
    return candidates
