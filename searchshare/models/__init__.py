"""Data models for SearchShare: input records and result data classes."""

from .records import (
    BrandVolumeRecord,
    RankedKeywordRecord,
    brand_volumes_from_payload,
    ranked_keywords_from_payload,
)
from .results import (
    # Enums
    GrowthInterpretation,
    ActionType,
    Tier,
    CategoryStatus,
    HiddenGemType,
    CannibalizationFix,
    SearchIntent,
    FunnelStage,
    # Metrics
    SOSResult,
    KeywordVisibility,
    SOVResult,
    GrowthGapResult,
    MetricsResult,
    # Detectors
    QuickWinOpportunity,
    HiddenGem,
    CompetingUrl,
    CannibalizationIssue,
    ContentGap,
    CategoryBreakdown,
    CompetitorStrength,
    FunnelOpportunity,
    FunnelStageAnalysis,
    # Actions
    ActionCandidate,
    ActionItem,
    # Bundles
    InsightsSummary,
    ActionableInsights,
    AnalysisResult,
)

__all__ = [
    "BrandVolumeRecord",
    "RankedKeywordRecord",
    "brand_volumes_from_payload",
    "ranked_keywords_from_payload",
    "GrowthInterpretation",
    "ActionType",
    "Tier",
    "CategoryStatus",
    "HiddenGemType",
    "CannibalizationFix",
    "SearchIntent",
    "FunnelStage",
    "SOSResult",
    "KeywordVisibility",
    "SOVResult",
    "GrowthGapResult",
    "MetricsResult",
    "QuickWinOpportunity",
    "HiddenGem",
    "CompetingUrl",
    "CannibalizationIssue",
    "ContentGap",
    "CategoryBreakdown",
    "CompetitorStrength",
    "FunnelOpportunity",
    "FunnelStageAnalysis",
    "ActionCandidate",
    "ActionItem",
    "InsightsSummary",
    "ActionableInsights",
    "AnalysisResult",
]
