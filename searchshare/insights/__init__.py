"""
Insights Module for SearchShare

Turns classified keyword rankings into actionable recommendations:

1. **Quick Wins** - page-1 keywords one push away from the top-3 CTR band
2. **Hidden Gems** - high-demand keywords where the brand is invisible
3. **Cannibalization** - intents where several own URLs compete
4. **Content Gaps** - categories with demand but almost no visible pages
5. **Competitor Strength** - competitor share of search vs own rankings
6. **Category Breakdown** - SOV and status per keyword category
7. **Funnel Stages** - SOV per awareness, consideration, decision and retention stage

The prioritizer merges every detector's candidates into one ranked
action list.

Example Usage:
    from searchshare.insights import run_analysis

    result = run_analysis(keywords, brands, brand_name="lavera")
    for action in result.insights.action_list[:5]:
        print(action.priority_score, action.title)
"""

# Classification
from .classifier import (
    UNCATEGORIZED,
    CategoryRule,
    DEFAULT_CATEGORY_RULES,
    DEFAULT_INTENT_RULES,
    INTENT_TO_FUNNEL,
    regex_rule,
    detect_category,
    is_branded_keyword,
    KeywordClassifier,
    classify_keywords,
    classify_intent,
    get_funnel_stage,
)

# Detectors
from .quick_wins import find_quick_wins, quick_win_candidates
from .hidden_gems import find_hidden_gems, hidden_gem_candidates
from .cannibalization import same_root, token_similarity, find_cannibalization, cannibalization_candidates
from .content_gaps import suggest_content_types, find_content_gaps, content_gap_candidates
from .competitors import estimate_competitor_strength, competitor_candidates
from .categories import category_status, calculate_category_breakdown, monitor_candidates
from .funnel import analyze_funnel_stages, funnel_breakdown

# Prioritization
from .prioritizer import (
    TIER_SCORES,
    STRATEGIC_FIT,
    impact_tier,
    score_candidate,
    prioritize_actions,
)

# Orchestration
from .engine import generate_actionable_insights, run_analysis

__all__ = [
    # Classification
    "UNCATEGORIZED",
    "CategoryRule",
    "DEFAULT_CATEGORY_RULES",
    "DEFAULT_INTENT_RULES",
    "INTENT_TO_FUNNEL",
    "regex_rule",
    "detect_category",
    "is_branded_keyword",
    "KeywordClassifier",
    "classify_keywords",
    "classify_intent",
    "get_funnel_stage",

    # Detectors
    "find_quick_wins",
    "quick_win_candidates",
    "find_hidden_gems",
    "hidden_gem_candidates",
    "same_root",
    "token_similarity",
    "find_cannibalization",
    "cannibalization_candidates",
    "suggest_content_types",
    "find_content_gaps",
    "content_gap_candidates",
    "estimate_competitor_strength",
    "competitor_candidates",
    "category_status",
    "calculate_category_breakdown",
    "monitor_candidates",
    "analyze_funnel_stages",
    "funnel_breakdown",

    # Prioritization
    "TIER_SCORES",
    "STRATEGIC_FIT",
    "impact_tier",
    "score_candidate",
    "prioritize_actions",

    # Orchestration
    "generate_actionable_insights",
    "run_analysis",
]
