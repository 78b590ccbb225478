"""
Test Suite for Quick-Win and Hidden-Gem Detection
"""

from searchshare.insights.hidden_gems import find_hidden_gems, hidden_gem_candidates
from searchshare.insights.quick_wins import find_quick_wins, quick_win_candidates
from searchshare.models import ActionType, HiddenGemType, Tier
from searchshare.utils.config import Settings


class TestQuickWins:
    """Test quick-win detection."""

    def test_sample_market_order(self, ranked_keywords, settings):
        wins = find_quick_wins(ranked_keywords, settings)

        assert [w.keyword for w in wins[:3]] == ["naturkosmetik", "bio shampoo", "naturkosmetik gesicht"]
        assert all(4 <= w.current_position <= 10 for w in wins)

    def test_naturkosmetik_uplift(self, ranked_keywords, settings):
        win = find_quick_wins(ranked_keywords, settings)[0]

        assert win.current_clicks == 1332
        assert win.potential_clicks == 1998
        assert win.click_uplift == 666
        assert win.uplift_percentage == 50
        assert win.effort == Tier.LOW
        assert win.target_position == 3
        assert win.url == "/naturkosmetik"

    def test_position_window(self, make_keyword, settings):
        keywords = [
            make_keyword("top", 5000, position=3),
            make_keyword("edge low", 5000, position=4),
            make_keyword("edge high", 5000, position=10),
            make_keyword("page two", 5000, position=11),
            make_keyword("unranked", 5000),
        ]
        wins = find_quick_wins(keywords, settings)
        assert {w.keyword for w in wins} == {"edge low", "edge high"}

    def test_min_volume(self, make_keyword, settings):
        keywords = [make_keyword("tiny", 99, position=5), make_keyword("enough", 100, position=5)]
        assert [w.keyword for w in find_quick_wins(keywords, settings)] == ["enough"]

    def test_effort_tiers(self, make_keyword):
        settings = Settings(_env_file=None, QUICK_WIN_MAX_POSITION=15)
        keywords = [
            make_keyword("low", 1000, position=6),
            make_keyword("medium", 1000, position=10),
            make_keyword("high", 1000, position=12),
        ]
        effort = {w.keyword: w.effort for w in find_quick_wins(keywords, settings)}
        assert effort == {"low": Tier.LOW, "medium": Tier.MEDIUM, "high": Tier.HIGH}

    def test_ties_broken_by_volume_then_keyword(self, make_keyword, settings):
        keywords = [
            make_keyword("b", 1000, position=4),
            make_keyword("a", 1000, position=4),
        ]
        assert [w.keyword for w in find_quick_wins(keywords, settings)] == ["a", "b"]

    def test_candidates(self, ranked_keywords, settings):
        candidates = quick_win_candidates(find_quick_wins(ranked_keywords, settings))

        assert all(c.action_type == ActionType.OPTIMIZE for c in candidates)
        assert candidates[0].uplift == 666
        assert candidates[0].time_to_result == Tier.LOW
        assert candidates[0].keyword == "naturkosmetik"


class TestHiddenGems:
    """Test hidden-gem detection."""

    def test_sample_market(self, ranked_keywords, settings):
        gems = find_hidden_gems(ranked_keywords, settings)

        assert [g.keyword for g in gems] == ["sonnencreme", "mascara", "sonnencreme kinder"]
        assert gems[0].potential_clicks == 1084
        assert all(g.opportunity == HiddenGemType.FIRST_MOVER for g in gems)

    def test_buried_vs_first_mover(self, make_keyword, settings):
        keywords = [
            make_keyword("buried", 10000, position=34),
            make_keyword("deep", 10000, position=51),
            make_keyword("visible", 10000, position=20),
            make_keyword("small a", 100, position=2),
            make_keyword("small b", 100, position=2),
        ]
        gems = {g.keyword: g.opportunity for g in find_hidden_gems(keywords, settings)}

        assert gems == {"buried": HiddenGemType.BURIED, "deep": HiddenGemType.FIRST_MOVER}

    def test_absolute_volume_floor(self, make_keyword, settings):
        """The top quartile of a tiny market is still too small."""
        keywords = [make_keyword(f"kw {i}", 50 + i) for i in range(10)]
        assert find_hidden_gems(keywords, settings) == []

    def test_limit(self, make_keyword):
        settings = Settings(_env_file=None, HIDDEN_GEM_LIMIT=2, HIDDEN_GEM_VOLUME_PERCENTILE=0)
        keywords = [make_keyword(f"kw {i}", 1000 * (i + 1)) for i in range(5)]

        gems = find_hidden_gems(keywords, settings)
        assert [g.keyword for g in gems] == ["kw 4", "kw 3"]

    def test_empty(self, settings):
        assert find_hidden_gems([], settings) == []

    def test_candidates(self, make_keyword, settings):
        keywords = [
            make_keyword("buried", 10000, position=34, url="/x"),
            make_keyword("missing", 10000),
            make_keyword("small", 100, position=2),
        ]
        candidates = {c.keyword: c for c in hidden_gem_candidates(find_hidden_gems(keywords, settings))}

        assert candidates["missing"].action_type == ActionType.CREATE
        assert candidates["missing"].effort == Tier.HIGH
        assert candidates["buried"].effort == Tier.MEDIUM
        assert candidates["buried"].time_to_result == Tier.HIGH
