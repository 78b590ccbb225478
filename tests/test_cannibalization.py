"""
Test Suite for Cannibalization Detection
"""

import pytest

from searchshare.insights.cannibalization import (
    cannibalization_candidates,
    find_cannibalization,
    same_root,
    token_similarity,
)
from searchshare.models import ActionType, CannibalizationFix, Tier


class TestTokenSimilarity:
    """Test keyword similarity on token roots."""

    def test_identical(self):
        assert token_similarity("bio shampoo", "bio shampoo") == 1.0

    def test_plural_overlaps(self):
        assert token_similarity("shampoo kaufen", "shampoos kaufen") == 1.0

    def test_partial(self):
        assert token_similarity("shampoo kaufen", "shampoo kaufen online") == pytest.approx(0.8)

    def test_unrelated(self):
        assert token_similarity("bio shampoo", "bio bodylotion") == 0.5
        assert token_similarity("mascara", "sonnencreme") == 0.0

    def test_compound_is_not_same_root(self):
        """A token buried inside a longer compound is a different intent."""
        assert same_root("shampoo", "shampoos")
        assert not same_root("shampoo", "hundeshampoo")
        assert token_similarity("shampoo", "hundeshampoo") == 0.0

    def test_root_coverage_configurable(self):
        assert token_similarity("shampoo", "hundeshampoo", min_root_coverage=0.5) == 1.0

    def test_short_tokens_ignored(self):
        """Tokens below the minimum length carry no intent."""
        assert token_similarity("spf 50", "spf 30") == 1.0
        assert token_similarity("a b", "c d") == 0.0


class TestFindCannibalization:
    """Test intent grouping and issue construction."""

    def test_single_url_never_flagged(self, make_keyword, settings):
        """One page covering related keywords is healthy."""
        keywords = [
            make_keyword("shampoo kaufen", 5400, position=3, url="/haarpflege", category="Hair Care"),
            make_keyword("shampoos kaufen", 2000, position=9, url="/haarpflege", category="Hair Care"),
        ]
        assert find_cannibalization(keywords, settings) == []

    def test_single_url_with_five_related_keywords(self, make_keyword, settings):
        keywords = [
            make_keyword(kw, 1000 + i * 500, position=2 + i, url="/haarpflege", category="Hair Care")
            for i, kw in enumerate([
                "bio shampoo", "bio shampoos", "bio shampoo kaufen", "shampoo bio", "bio shampoo online",
            ])
        ]
        assert find_cannibalization(keywords, settings) == []

    def test_compound_keywords_not_grouped(self, make_keyword, settings):
        """Dog shampoo and hair shampoo are different intents on different pages."""
        keywords = [
            make_keyword("shampoo", 5400, position=3, url="/haarpflege", category="Hair Care"),
            make_keyword("hundeshampoo", 2000, position=9, url="/hund", category="Hair Care"),
        ]
        assert find_cannibalization(keywords, settings) == []

    def test_two_urls_flagged(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 5400, position=3, url="/haarpflege", category="Hair Care"),
            make_keyword("bio shampoos", 2000, position=9, url="/shampoo", category="Hair Care"),
        ]
        issues = find_cannibalization(keywords, settings)

        assert len(issues) == 1
        issue = issues[0]
        assert issue.intent == "bio shampoo"
        assert issue.urls == ["/haarpflege", "/shampoo"]
        assert issue.best_position == 3
        assert issue.total_volume == 7400
        assert issue.current_visible_volume == 522
        assert issue.potential_visible_volume == 666
        assert issue.lost_opportunity == 144
        assert issue.recommendation == CannibalizationFix.REDIRECT

    def test_differentiate_close_positions(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 5400, position=3, url="/a", category="Hair Care"),
            make_keyword("bio shampoos", 2000, position=5, url="/b", category="Hair Care"),
        ]
        assert find_cannibalization(keywords, settings)[0].recommendation == CannibalizationFix.DIFFERENTIATE

    def test_consolidate_many_urls(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 1000, position=p, url=f"/page-{p}", category="Hair Care")
            for p in (2, 6, 11, 15)
        ]
        issue = find_cannibalization(keywords, settings)[0]

        assert len(issue.competing_urls) == 4
        assert issue.recommendation == CannibalizationFix.CONSOLIDATE

    def test_single_linkage(self, make_keyword, settings):
        keywords = [
            make_keyword("shampoo kaufen", 1000, position=2, url="/a", category="Hair Care"),
            make_keyword("shampoo kaufen online", 1000, position=6, url="/b", category="Hair Care"),
            make_keyword("kaufen online", 1000, position=12, url="/c", category="Hair Care"),
        ]
        issues = find_cannibalization(keywords, settings)

        assert len(issues) == 1
        assert len(issues[0].keywords) == 3

    def test_categories_kept_apart(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 5400, position=3, url="/a", category="Hair Care"),
            make_keyword("bio shampoos", 2000, position=9, url="/b", category="Body Care"),
        ]
        assert find_cannibalization(keywords, settings) == []

    def test_unranked_and_urlless_ignored(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 5400, position=3, url="/a", category="Hair Care"),
            make_keyword("bio shampoos", 2000, url="/b", category="Hair Care"),
            make_keyword("bio shampoo test", 2000, position=4, url="", category="Hair Care"),
        ]
        assert find_cannibalization(keywords, settings) == []

    def test_sorted_by_lost_opportunity(self, make_keyword, settings):
        keywords = [
            make_keyword("mascara", 1000, position=2, url="/a", category="Makeup"),
            make_keyword("mascaras", 1000, position=12, url="/b", category="Makeup"),
            make_keyword("bio shampoo", 50000, position=2, url="/c", category="Hair Care"),
            make_keyword("bio shampoos", 50000, position=12, url="/d", category="Hair Care"),
        ]
        issues = find_cannibalization(keywords, settings)
        assert [i.intent for i in issues] == ["bio shampoo", "mascara"]


class TestCannibalizationCandidates:
    """Test action candidates for cannibalization issues."""

    def test_redirect_is_low_effort(self, make_keyword, settings):
        keywords = [
            make_keyword("bio shampoo", 5400, position=3, url="/haarpflege", category="Hair Care"),
            make_keyword("bio shampoos", 2000, position=9, url="/shampoo", category="Hair Care"),
        ]
        candidate = cannibalization_candidates(find_cannibalization(keywords, settings))[0]

        assert candidate.action_type == ActionType.OPTIMIZE
        assert candidate.effort == Tier.LOW
        assert candidate.uplift == 144
        assert "/shampoo" in candidate.description
