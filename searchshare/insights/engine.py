"""
Insights Engine - Orchestrates the full brand analysis.

This engine coordinates:
1. Classification: category + branded flag per keyword
2. Headline metrics: SOS, SOV, Growth Gap
3. Detectors: quick wins, hidden gems, category breakdown,
   competitor strength, cannibalization, content gaps,
   funnel stages
4. Prioritization: one globally ranked action list

Every step is a pure function of its inputs; the same records always
produce the same analysis.
"""

import logging
from typing import Iterable, List, Optional

from ..models import (
    ActionableInsights,
    AnalysisResult,
    BrandVolumeRecord,
    CategoryStatus,
    InsightsSummary,
    RankedKeywordRecord,
)
from ..scoring.metrics import calculate_growth_gap, calculate_sos, calculate_sov, dedupe_brand_volumes
from ..utils.config import Settings, get_settings
from .cannibalization import cannibalization_candidates, find_cannibalization
from .categories import calculate_category_breakdown, monitor_candidates
from .classifier import KeywordClassifier
from .competitors import competitor_candidates, estimate_competitor_strength
from .content_gaps import content_gap_candidates, find_content_gaps
from .funnel import analyze_funnel_stages, funnel_breakdown
from .hidden_gems import find_hidden_gems, hidden_gem_candidates
from .prioritizer import prioritize_actions
from .quick_wins import find_quick_wins, quick_win_candidates

logger = logging.getLogger(__name__)

STRONG_STATUSES = (CategoryStatus.LEADING, CategoryStatus.COMPETITIVE)
WEAK_STATUSES = (CategoryStatus.TRAILING, CategoryStatus.WEAK)


def _resolve_brand_name(
    brand_name: Optional[str],
    brands: List[BrandVolumeRecord],
) -> Optional[str]:
    """Fall back to the own-brand record's label when no name is given."""
    if brand_name:
        return brand_name
    own = next((b for b in brands if b.is_own_brand), None)
    return own.brand_label if own else None


def _build_insights(
    keywords: List[RankedKeywordRecord],
    brands: List[BrandVolumeRecord],
    own_share: float,
    settings: Settings,
) -> ActionableInsights:
    quick_wins = find_quick_wins(keywords, settings)
    hidden_gems = find_hidden_gems(keywords, settings)
    category_breakdown = calculate_category_breakdown(keywords)
    competitor_strengths = estimate_competitor_strength(brands, keywords, own_share)
    cannibalization_issues = find_cannibalization(keywords, settings)
    content_gaps = find_content_gaps(keywords, settings)
    funnel_analysis = analyze_funnel_stages(keywords)

    candidates = (
        quick_win_candidates(quick_wins)
        + hidden_gem_candidates(hidden_gems)
        + cannibalization_candidates(cannibalization_issues)
        + content_gap_candidates(content_gaps)
        + competitor_candidates(competitor_strengths, own_share)
        + monitor_candidates(category_breakdown)
    )
    action_list = prioritize_actions(candidates)

    summary = InsightsSummary(
        total_quick_win_potential=sum(w.click_uplift for w in quick_wins),
        strong_categories=sum(1 for c in category_breakdown if c.status in STRONG_STATUSES),
        weak_categories=sum(1 for c in category_breakdown if c.status in WEAK_STATUSES),
        hidden_gems_count=len(hidden_gems),
        cannibalization_count=len(cannibalization_issues),
        content_gaps_count=len(content_gaps),
        funnel_breakdown=funnel_breakdown(funnel_analysis),
    )
    if action_list:
        summary.top_priority_action = action_list[0].title

    logger.info(
        f"Insights: {len(quick_wins)} quick wins, {len(hidden_gems)} hidden gems, "
        f"{len(cannibalization_issues)} cannibalization issues, {len(content_gaps)} content gaps, "
        f"{len(action_list)} actions"
    )

    return ActionableInsights(
        quick_wins=quick_wins,
        hidden_gems=hidden_gems,
        category_breakdown=category_breakdown,
        competitor_strengths=competitor_strengths,
        cannibalization_issues=cannibalization_issues,
        content_gaps=content_gaps,
        funnel_analysis=funnel_analysis,
        action_list=action_list,
        summary=summary,
    )


def generate_actionable_insights(
    ranked_keywords: Iterable[RankedKeywordRecord],
    brand_volumes: Iterable[BrandVolumeRecord],
    brand_name: Optional[str] = None,
    aliases: Iterable[str] = (),
    settings: Optional[Settings] = None,
) -> ActionableInsights:
    """
    Run classification, all detectors and the prioritizer.

    Args:
        ranked_keywords: Tracked keywords (classified in place)
        brand_volumes: Own and competitor brand volumes
        brand_name: Own brand name for branded detection
            (default: label of the own-brand record)
        aliases: Alternative spellings of the brand
        settings: Threshold overrides (default: environment settings)

    Returns:
        ActionableInsights
    """
    settings = settings or get_settings()
    keywords = list(ranked_keywords)
    brands = dedupe_brand_volumes(brand_volumes)

    KeywordClassifier(_resolve_brand_name(brand_name, brands), aliases).classify(keywords)
    own_share = calculate_sos(brands).share_of_search

    return _build_insights(keywords, brands, own_share, settings)


def run_analysis(
    ranked_keywords: Iterable[RankedKeywordRecord],
    brand_volumes: Iterable[BrandVolumeRecord],
    brand_name: Optional[str] = None,
    aliases: Iterable[str] = (),
    settings: Optional[Settings] = None,
) -> AnalysisResult:
    """
    Full analysis: headline metrics plus actionable insights.

    Returns:
        AnalysisResult
    """
    settings = settings or get_settings()
    keywords = list(ranked_keywords)
    brands = dedupe_brand_volumes(brand_volumes)
    resolved_brand = _resolve_brand_name(brand_name, brands)

    logger.info(
        f"Starting analysis for {resolved_brand or 'unnamed brand'}: "
        f"{len(brands)} brands, {len(keywords)} keywords"
    )

    KeywordClassifier(resolved_brand, aliases).classify(keywords)

    sos = calculate_sos(brands)
    sov = calculate_sov(keywords)
    gap = calculate_growth_gap(sos.share_of_search, sov.share_of_voice)
    insights = _build_insights(keywords, brands, sos.share_of_search, settings)

    logger.info(
        f"Analysis complete: SOS={sos.share_of_search}% SOV={sov.share_of_voice}% "
        f"gap={gap.gap} ({gap.interpretation.value})"
    )
    return AnalysisResult(sos=sos, sov=sov, gap=gap, insights=insights)
