"""
Result Data Classes

Outputs of the metrics calculator, the insight detectors and the action
prioritizer. Every result serializes with ``to_dict()`` for the API,
the CLI and the analysis repository.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# =============================================================================
# ENUMS
# =============================================================================

class GrowthInterpretation(Enum):
    """Reading of the SOV - SOS gap."""
    GROWTH_POTENTIAL = "growth_potential"
    MISSING_OPPORTUNITIES = "missing_opportunities"
    BALANCED = "balanced"


class ActionType(Enum):
    """What kind of work an action item asks for."""
    OPTIMIZE = "optimize"
    CREATE = "create"
    MONITOR = "monitor"
    INVESTIGATE = "investigate"


class Tier(Enum):
    """Three-step scale used for impact, effort and time to result."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CategoryStatus(Enum):
    """Competitive standing of a keyword category."""
    LEADING = "leading"
    COMPETITIVE = "competitive"
    TRAILING = "trailing"
    WEAK = "weak"


class HiddenGemType(Enum):
    """Why a hidden gem is currently invisible."""
    FIRST_MOVER = "first_mover"   # Not ranking or beyond position 50
    BURIED = "buried"             # Ranking 21-50


class CannibalizationFix(Enum):
    """Recommended fix for competing internal pages."""
    CONSOLIDATE = "consolidate"
    DIFFERENTIATE = "differentiate"
    REDIRECT = "redirect"


class SearchIntent(Enum):
    """What the searcher is trying to do."""
    INFORMATIONAL = "informational"
    COMMERCIAL = "commercial"
    TRANSACTIONAL = "transactional"
    NAVIGATIONAL = "navigational"


class FunnelStage(Enum):
    """Marketing funnel stage implied by a keyword's intent."""
    AWARENESS = "awareness"           # Informational
    CONSIDERATION = "consideration"   # Commercial
    DECISION = "decision"             # Transactional
    RETENTION = "retention"           # Navigational


# =============================================================================
# HEADLINE METRICS
# =============================================================================

@dataclass
class SOSResult:
    """Share of Search."""
    share_of_search: float
    brand_volume: int
    total_brand_volume: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "share_of_search": self.share_of_search,
            "brand_volume": self.brand_volume,
            "total_brand_volume": self.total_brand_volume,
        }


@dataclass
class KeywordVisibility:
    """Per-keyword row of the SOV breakdown."""
    keyword: str
    search_volume: int
    position: Optional[int]
    ctr: float
    visible_volume: int
    url: str = ""
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "search_volume": self.search_volume,
            "position": self.position,
            "ctr": self.ctr,
            "visible_volume": self.visible_volume,
            "url": self.url,
            "category": self.category,
        }


@dataclass
class SOVResult:
    """Share of Voice with its per-keyword breakdown."""
    share_of_voice: float
    visible_volume: int
    total_market_volume: int
    keyword_breakdown: List[KeywordVisibility] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "share_of_voice": self.share_of_voice,
            "visible_volume": self.visible_volume,
            "total_market_volume": self.total_market_volume,
            "keyword_breakdown": [k.to_dict() for k in self.keyword_breakdown],
        }


@dataclass
class GrowthGapResult:
    """SOV minus SOS, with its interpretation."""
    gap: float
    interpretation: GrowthInterpretation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gap": self.gap,
            "interpretation": self.interpretation.value,
        }


@dataclass
class MetricsResult:
    """SOS, SOV and Growth Gap for one run."""
    sos: SOSResult
    sov: SOVResult
    gap: GrowthGapResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sos": self.sos.to_dict(),
            "sov": self.sov.to_dict(),
            "gap": self.gap.to_dict(),
        }


# =============================================================================
# DETECTOR OUTPUTS
# =============================================================================

@dataclass
class QuickWinOpportunity:
    """Keyword just below the top-3 CTR band worth a ranking push."""
    keyword: str
    current_position: int
    target_position: int
    search_volume: int
    current_clicks: int
    potential_clicks: int
    click_uplift: int
    uplift_percentage: int
    effort: Tier
    url: str
    category: Optional[str]
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "current_position": self.current_position,
            "target_position": self.target_position,
            "search_volume": self.search_volume,
            "current_clicks": self.current_clicks,
            "potential_clicks": self.potential_clicks,
            "click_uplift": self.click_uplift,
            "uplift_percentage": self.uplift_percentage,
            "effort": self.effort.value,
            "url": self.url,
            "category": self.category,
            "reasoning": self.reasoning,
        }


@dataclass
class HiddenGem:
    """High-volume keyword with little or no ranking presence."""
    keyword: str
    search_volume: int
    position: Optional[int]
    opportunity: HiddenGemType
    potential_clicks: int
    url: str
    category: Optional[str]
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "search_volume": self.search_volume,
            "position": self.position,
            "opportunity": self.opportunity.value,
            "potential_clicks": self.potential_clicks,
            "url": self.url,
            "category": self.category,
            "reasoning": self.reasoning,
        }


@dataclass
class CompetingUrl:
    """One internal page inside a cannibalized intent group."""
    url: str
    best_position: int
    keywords: List[str]
    visible_volume: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "best_position": self.best_position,
            "keywords": list(self.keywords),
            "visible_volume": self.visible_volume,
        }


@dataclass
class CannibalizationIssue:
    """Several internal URLs ranking for the same search intent."""
    intent: str
    category: Optional[str]
    keywords: List[str]
    competing_urls: List[CompetingUrl]
    total_volume: int
    best_position: int
    current_visible_volume: int
    potential_visible_volume: int
    lost_opportunity: int
    recommendation: CannibalizationFix

    @property
    def urls(self) -> List[str]:
        return [u.url for u in self.competing_urls]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.intent,
            "category": self.category,
            "keywords": list(self.keywords),
            "competing_urls": [u.to_dict() for u in self.competing_urls],
            "total_volume": self.total_volume,
            "best_position": self.best_position,
            "current_visible_volume": self.current_visible_volume,
            "potential_visible_volume": self.potential_visible_volume,
            "lost_opportunity": self.lost_opportunity,
            "recommendation": self.recommendation.value,
        }


@dataclass
class ContentGap:
    """Category with search demand the brand barely covers."""
    category: str
    total_volume: int
    unclaimed_volume: int
    keyword_count: int
    ranked_keyword_count: int
    coverage: float                 # Share of category keywords visibly ranked (0-100)
    opportunity_score: int          # 0-100, relative to the largest gap of the run
    estimated_traffic_gain: int
    priority: Tier
    top_missing_keywords: List[str] = field(default_factory=list)
    existing_urls: List[str] = field(default_factory=list)
    suggested_content_types: List[str] = field(default_factory=list)
    reasoning: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "total_volume": self.total_volume,
            "unclaimed_volume": self.unclaimed_volume,
            "keyword_count": self.keyword_count,
            "ranked_keyword_count": self.ranked_keyword_count,
            "coverage": self.coverage,
            "opportunity_score": self.opportunity_score,
            "estimated_traffic_gain": self.estimated_traffic_gain,
            "priority": self.priority.value,
            "top_missing_keywords": list(self.top_missing_keywords),
            "existing_urls": list(self.existing_urls),
            "suggested_content_types": list(self.suggested_content_types),
            "reasoning": self.reasoning,
        }


@dataclass
class CategoryBreakdown:
    """Share of Voice within one keyword category."""
    category: str
    share_of_voice: float
    visible_volume: int
    total_volume: int
    keyword_count: int
    avg_position: Optional[float]
    top_keywords: List[str]
    status: CategoryStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "share_of_voice": self.share_of_voice,
            "visible_volume": self.visible_volume,
            "total_volume": self.total_volume,
            "keyword_count": self.keyword_count,
            "avg_position": self.avg_position,
            "top_keywords": list(self.top_keywords),
            "status": self.status.value,
        }


@dataclass
class CompetitorStrength:
    """Competitor share of branded search next to the brand's own rankings."""
    competitor_label: str
    brand_search_volume: int
    estimated_share_of_search: float
    strong_keywords: int            # Own generic keywords ranked 1-3
    moderate_keywords: int          # 4-10
    weak_keywords: int              # 11+ or unranked
    keywords_analyzed: int
    share_vs_own: float             # Competitor share minus own SOS, percentage points

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competitor_label": self.competitor_label,
            "brand_search_volume": self.brand_search_volume,
            "estimated_share_of_search": self.estimated_share_of_search,
            "strong_keywords": self.strong_keywords,
            "moderate_keywords": self.moderate_keywords,
            "weak_keywords": self.weak_keywords,
            "keywords_analyzed": self.keywords_analyzed,
            "share_vs_own": self.share_vs_own,
        }


@dataclass
class FunnelOpportunity:
    """A ranked keyword in a funnel stage that is not yet in the top 3."""
    keyword: str
    search_volume: int
    position: int
    intent: SearchIntent
    potential_clicks: int           # Clicks at position 3
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "search_volume": self.search_volume,
            "position": self.position,
            "intent": self.intent.value,
            "potential_clicks": self.potential_clicks,
            "url": self.url,
        }


@dataclass
class FunnelStageAnalysis:
    """Visibility of the brand within one funnel stage."""
    stage: FunnelStage
    label: str
    description: str
    keyword_count: int
    total_volume: int
    visible_volume: int
    share_of_voice: float
    avg_position: Optional[float]
    top_keywords: List[str] = field(default_factory=list)
    opportunities: List[FunnelOpportunity] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.value,
            "label": self.label,
            "description": self.description,
            "keyword_count": self.keyword_count,
            "total_volume": self.total_volume,
            "visible_volume": self.visible_volume,
            "share_of_voice": self.share_of_voice,
            "avg_position": self.avg_position,
            "top_keywords": list(self.top_keywords),
            "opportunities": [o.to_dict() for o in self.opportunities],
            "insights": list(self.insights),
        }


# =============================================================================
# ACTIONS
# =============================================================================

@dataclass
class ActionCandidate:
    """Unscored action emitted by a detector."""
    action_type: ActionType
    title: str
    description: str
    reasoning: str
    uplift: int
    effort: Tier
    time_to_result: Tier
    keyword: Optional[str] = None
    category: Optional[str] = None
    source: str = ""


@dataclass
class ActionItem:
    """Scored, globally ranked recommendation."""
    id: str
    action_type: ActionType
    title: str
    description: str
    reasoning: str
    impact: Tier
    effort: Tier
    priority_score: int
    estimated_click_uplift: int
    keyword: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "action_type": self.action_type.value,
            "title": self.title,
            "description": self.description,
            "reasoning": self.reasoning,
            "impact": self.impact.value,
            "effort": self.effort.value,
            "priority_score": self.priority_score,
            "estimated_click_uplift": self.estimated_click_uplift,
            "keyword": self.keyword,
            "category": self.category,
        }


# =============================================================================
# BUNDLES
# =============================================================================

@dataclass
class InsightsSummary:
    """Headline numbers for the insights bundle."""
    total_quick_win_potential: int = 0
    strong_categories: int = 0
    weak_categories: int = 0
    hidden_gems_count: int = 0
    cannibalization_count: int = 0
    content_gaps_count: int = 0
    top_priority_action: str = "No actions identified"
    # Stage value -> {"count", "volume"}
    funnel_breakdown: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_quick_win_potential": self.total_quick_win_potential,
            "strong_categories": self.strong_categories,
            "weak_categories": self.weak_categories,
            "hidden_gems_count": self.hidden_gems_count,
            "cannibalization_count": self.cannibalization_count,
            "content_gaps_count": self.content_gaps_count,
            "top_priority_action": self.top_priority_action,
            "funnel_breakdown": {stage: dict(v) for stage, v in self.funnel_breakdown.items()},
        }


@dataclass
class ActionableInsights:
    """Everything the detectors and the prioritizer produced for one run."""
    quick_wins: List[QuickWinOpportunity] = field(default_factory=list)
    hidden_gems: List[HiddenGem] = field(default_factory=list)
    category_breakdown: List[CategoryBreakdown] = field(default_factory=list)
    competitor_strengths: List[CompetitorStrength] = field(default_factory=list)
    cannibalization_issues: List[CannibalizationIssue] = field(default_factory=list)
    content_gaps: List[ContentGap] = field(default_factory=list)
    funnel_analysis: List[FunnelStageAnalysis] = field(default_factory=list)
    action_list: List[ActionItem] = field(default_factory=list)
    summary: InsightsSummary = field(default_factory=InsightsSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quick_wins": [q.to_dict() for q in self.quick_wins],
            "hidden_gems": [g.to_dict() for g in self.hidden_gems],
            "category_breakdown": [c.to_dict() for c in self.category_breakdown],
            "competitor_strengths": [c.to_dict() for c in self.competitor_strengths],
            "cannibalization_issues": [i.to_dict() for i in self.cannibalization_issues],
            "content_gaps": [g.to_dict() for g in self.content_gaps],
            "funnel_analysis": [s.to_dict() for s in self.funnel_analysis],
            "action_list": [a.to_dict() for a in self.action_list],
            "summary": self.summary.to_dict(),
        }


@dataclass
class AnalysisResult:
    """Headline metrics plus insights for one brand analysis."""
    sos: SOSResult
    sov: SOVResult
    gap: GrowthGapResult
    insights: ActionableInsights

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sos": self.sos.to_dict(),
            "sov": self.sov.to_dict(),
            "gap": self.gap.to_dict(),
            "insights": self.insights.to_dict(),
        }
