"""
Test Suite for Search Intent and Funnel Stage Analysis
"""

import pytest

from searchshare.insights.classifier import classify_intent, get_funnel_stage, regex_rule
from searchshare.insights.funnel import analyze_funnel_stages, funnel_breakdown
from searchshare.models import FunnelStage, SearchIntent


class TestClassifyIntent:
    """Test rule-based intent detection."""

    @pytest.mark.parametrize("keyword,intent", [
        ("sonnencreme kaufen", SearchIntent.TRANSACTIONAL),
        ("buy sunscreen online", SearchIntent.TRANSACTIONAL),
        ("beste sonnencreme", SearchIntent.COMMERCIAL),
        ("sunscreen review", SearchIntent.COMMERCIAL),
        ("lavera kontakt", SearchIntent.NAVIGATIONAL),
        ("weleda login", SearchIntent.NAVIGATIONAL),
        ("wie wirkt retinol", SearchIntent.INFORMATIONAL),
        ("what is spf", SearchIntent.INFORMATIONAL),
    ])
    def test_modifiers(self, keyword, intent):
        assert classify_intent(keyword) == intent

    def test_transactional_beats_commercial(self):
        assert classify_intent("best price sunscreen") == SearchIntent.TRANSACTIONAL

    def test_product_like_is_commercial(self):
        assert classify_intent("skincare software") == SearchIntent.COMMERCIAL

    def test_default_is_informational(self):
        assert classify_intent("naturkosmetik") == SearchIntent.INFORMATIONAL
        assert classify_intent("") == SearchIntent.INFORMATIONAL

    def test_custom_rules(self):
        rules = [regex_rule("transactional", r"\bpreisvergleich\b")]
        assert classify_intent("sonnencreme preisvergleich", rules) == SearchIntent.TRANSACTIONAL
        assert classify_intent("sonnencreme kaufen", rules) == SearchIntent.INFORMATIONAL


class TestGetFunnelStage:
    """Test the intent to funnel stage mapping."""

    def test_mapping(self):
        assert get_funnel_stage("wie wirkt retinol") == FunnelStage.AWARENESS
        assert get_funnel_stage("beste sonnencreme") == FunnelStage.CONSIDERATION
        assert get_funnel_stage("sonnencreme kaufen") == FunnelStage.DECISION
        assert get_funnel_stage("lavera kontakt") == FunnelStage.RETENTION


@pytest.fixture
def funnel_keywords(make_keyword):
    return [
        make_keyword("sonnencreme kaufen", 1000, position=2, url="/kaufen"),
        make_keyword("sonnencreme online bestellen", 500),
        make_keyword("beste sonnencreme", 2000, position=6, url="/vergleich"),
        make_keyword("wie wirkt sonnencreme", 400, position=12, url="/ratgeber"),
    ]


class TestAnalyzeFunnelStages:
    """Test per-stage visibility."""

    def test_stage_order_and_skipping(self, funnel_keywords):
        stages = [a.stage for a in analyze_funnel_stages(funnel_keywords)]
        assert stages == [FunnelStage.AWARENESS, FunnelStage.CONSIDERATION, FunnelStage.DECISION]

    def test_decision_stage(self, funnel_keywords):
        decision = analyze_funnel_stages(funnel_keywords)[2]

        assert decision.label == "Decision Stage"
        assert decision.keyword_count == 2
        assert decision.total_volume == 1500
        assert decision.visible_volume == 150
        assert decision.share_of_voice == 10.0
        assert decision.avg_position == 2.0
        assert decision.top_keywords == ["sonnencreme kaufen", "sonnencreme online bestellen"]
        assert decision.opportunities == []

    def test_opportunities(self, funnel_keywords):
        consideration = analyze_funnel_stages(funnel_keywords)[1]

        assert consideration.share_of_voice == 3.0
        [opportunity] = consideration.opportunities
        assert opportunity.keyword == "beste sonnencreme"
        assert opportunity.intent == SearchIntent.COMMERCIAL
        assert opportunity.potential_clicks == 180
        assert opportunity.url == "/vergleich"

    def test_awareness_insights(self, funnel_keywords):
        awareness = analyze_funnel_stages(funnel_keywords)[0]

        assert awareness.avg_position == 12.0
        assert awareness.opportunities[0].potential_clicks == 36
        assert any("Average position #12.0" in line for line in awareness.insights)

    def test_retention_reported_when_present(self, make_keyword):
        analyses = analyze_funnel_stages([make_keyword("lavera kontakt", 300, position=1, url="/kontakt")])

        assert [a.stage for a in analyses] == [FunnelStage.AWARENESS, FunnelStage.RETENTION]
        assert analyses[1].share_of_voice == 28.0

    def test_empty_input_keeps_awareness(self):
        [awareness] = analyze_funnel_stages([])

        assert awareness.stage == FunnelStage.AWARENESS
        assert awareness.keyword_count == 0
        assert awareness.share_of_voice == 0.0
        assert awareness.avg_position is None
        assert awareness.insights[0].startswith("No awareness stage keywords")

    def test_to_dict(self, funnel_keywords):
        data = analyze_funnel_stages(funnel_keywords)[1].to_dict()

        assert data["stage"] == "consideration"
        assert data["opportunities"][0]["intent"] == "commercial"


class TestFunnelBreakdown:
    """Test the summary counts per stage."""

    def test_all_stages_present(self, funnel_keywords):
        breakdown = funnel_breakdown(analyze_funnel_stages(funnel_keywords))

        assert breakdown == {
            "awareness": {"count": 1, "volume": 400},
            "consideration": {"count": 1, "volume": 2000},
            "decision": {"count": 2, "volume": 1500},
            "retention": {"count": 0, "volume": 0},
        }
