"""
Content-Gap Detector

Flags categories where search demand exists but the brand has almost no
visible pages: few of the category's keywords rank on the first two SERP
pages and a meaningful volume is left unclaimed.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..models import (
    ActionCandidate,
    ActionType,
    ContentGap,
    RankedKeywordRecord,
    Tier,
)
from ..utils.config import Settings, get_settings
from .classifier import UNCATEGORIZED

logger = logging.getLogger(__name__)

HIGH_PRIORITY_VOLUME = 50000
MEDIUM_PRIORITY_VOLUME = 10000

# (category substrings, content formats)
CONTENT_TYPE_SUGGESTIONS = [
    (("tire", "reifen"), ["Tire size guide", "Seasonal comparison article", "Product finder tool",
                          "Installation FAQ", "Dealer locator page"]),
    (("beauty", "skin", "makeup", "care", "cosmetic", "aging", "fragrance"),
     ["How-to tutorial", "Product comparison", "Ingredient guide", "Routine builder",
      "Expert tips article"]),
    (("running", "training", "sport", "football", "outdoor", "cycling"),
     ["Training guide", "Product review", "Comparison article", "Beginner's guide",
      "Expert interview"]),
    (("tech", "phone", "laptop", "audio", "smart home"),
     ["Buying guide", "Comparison table", "Setup tutorial", "Troubleshooting FAQ",
      "Feature spotlight"]),
    (("automotive", "car", "wheel"),
     ["Buying guide", "Maintenance tips", "Comparison article", "How-to guide", "Cost calculator"]),
]
DEFAULT_CONTENT_TYPES = ["Comprehensive guide", "FAQ page", "How-to article",
                         "Comparison content", "Expert roundup"]


def suggest_content_types(category: str) -> List[str]:
    """Content formats that usually work for a category."""
    lowered = category.lower()
    for needles, content_types in CONTENT_TYPE_SUGGESTIONS:
        if any(n in lowered for n in needles):
            return list(content_types)
    return list(DEFAULT_CONTENT_TYPES)


def _priority(unclaimed_volume: int) -> Tier:
    if unclaimed_volume > HIGH_PRIORITY_VOLUME:
        return Tier.HIGH
    if unclaimed_volume > MEDIUM_PRIORITY_VOLUME:
        return Tier.MEDIUM
    return Tier.LOW


def find_content_gaps(
    ranked_keywords: Iterable[RankedKeywordRecord],
    settings: Optional[Settings] = None,
) -> List[ContentGap]:
    """
    Detect under-covered categories.

    Args:
        ranked_keywords: Classified keyword records
        settings: Threshold overrides (default: environment settings)

    Returns:
        Content gaps sorted by unclaimed volume desc
    """
    settings = settings or get_settings()
    visible_position = settings.CONTENT_GAP_VISIBLE_POSITION

    by_category: Dict[str, List[RankedKeywordRecord]] = defaultdict(list)
    for kw in ranked_keywords:
        category = kw.category or UNCATEGORIZED
        if category == UNCATEGORIZED:
            continue
        by_category[category].append(kw)

    flagged = []
    for category, keywords in by_category.items():
        visible, missing = [], []
        for kw in keywords:
            if kw.position is not None and kw.position <= visible_position:
                visible.append(kw)
            else:
                missing.append(kw)
        coverage = len(visible) / len(keywords)
        unclaimed = sum(kw.search_volume for kw in missing)

        if coverage > settings.CONTENT_GAP_MAX_COVERAGE or unclaimed < settings.CONTENT_GAP_MIN_VOLUME:
            continue
        flagged.append((category, keywords, visible, missing, coverage, unclaimed))

    if not flagged:
        logger.debug("Found 0 content gaps")
        return []

    max_unclaimed = max(item[5] for item in flagged)
    gaps = []
    for category, keywords, visible, missing, coverage, unclaimed in flagged:
        top_missing = sorted(missing, key=lambda kw: (-kw.search_volume, kw.keyword))[:5]
        existing_urls = list(dict.fromkeys(kw.url for kw in keywords if kw.url))[:5]
        gain = round(unclaimed * settings.CONTENT_GAP_CAPTURE_RATE)

        reasons = [
            f"Only {len(visible)} of {len(keywords)} '{category}' keywords rank in the top {visible_position}",
            f"{unclaimed:,} monthly searches go to competitors",
        ]
        if not existing_urls:
            reasons.append("No page currently targets this category")
        reasons.append(f"Dedicated content could capture ~{gain:,} clicks/month")

        gaps.append(ContentGap(
            category=category,
            total_volume=sum(kw.search_volume for kw in keywords),
            unclaimed_volume=unclaimed,
            keyword_count=len(keywords),
            ranked_keyword_count=len(visible),
            coverage=round(coverage * 100, 1),
            opportunity_score=round(100 * unclaimed / max_unclaimed) if max_unclaimed else 0,
            estimated_traffic_gain=gain,
            priority=_priority(unclaimed),
            top_missing_keywords=[kw.keyword for kw in top_missing],
            existing_urls=existing_urls,
            suggested_content_types=suggest_content_types(category),
            reasoning=". ".join(reasons) + ".",
        ))

    gaps.sort(key=lambda g: (-g.unclaimed_volume, g.category))
    logger.debug(f"Found {len(gaps)} content gaps")
    return gaps


def content_gap_candidates(content_gaps: Iterable[ContentGap]) -> List[ActionCandidate]:
    """Turn content gaps into create actions."""
    return [
        ActionCandidate(
            action_type=ActionType.CREATE,
            title=f"Build a '{gap.category}' content hub",
            description=(
                f"Create {', '.join(gap.suggested_content_types[:3]).lower()} "
                f"covering {', '.join(gap.top_missing_keywords[:3])}."
            ),
            reasoning=gap.reasoning,
            uplift=gap.estimated_traffic_gain,
            effort=Tier.HIGH,
            time_to_result=Tier.HIGH,
            category=gap.category,
            source="content_gap",
        )
        for gap in content_gaps
    ]
