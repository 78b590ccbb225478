"""
Test Suite for the Action Prioritizer

Includes property checks over seeded random candidate sets.
"""

import random

import pytest

from searchshare.insights.prioritizer import (
    STRATEGIC_FIT,
    TIER_SCORES,
    impact_tier,
    prioritize_actions,
    score_candidate,
)
from searchshare.models import ActionCandidate, ActionType, Tier


def make_candidate(title="action", action_type=ActionType.OPTIMIZE, uplift=0,
                   effort=Tier.LOW, time_to_result=Tier.LOW):
    return ActionCandidate(
        action_type=action_type,
        title=title,
        description="",
        reasoning="",
        uplift=uplift,
        effort=effort,
        time_to_result=time_to_result,
    )


def random_candidates(rng, count):
    return [
        make_candidate(
            title=f"action {i}",
            action_type=rng.choice(list(ActionType)),
            uplift=rng.choice([0, rng.randint(0, 50000)]),
            effort=rng.choice(list(Tier)),
            time_to_result=rng.choice(list(Tier)),
        )
        for i in range(count)
    ]


class TestScoreCandidate:
    """Test the weighted priority formula."""

    def test_best_possible(self):
        """Max impact, low effort, optimize, fast result."""
        candidate = make_candidate(uplift=1000)
        # 0.35*100 + 0.25*80 + 0.20*90 + 0.20*80 = 89
        assert score_candidate(candidate, 1000) == 89

    def test_worst_possible(self):
        candidate = make_candidate(
            action_type=ActionType.MONITOR, effort=Tier.HIGH, time_to_result=Tier.HIGH,
        )
        # 0 + 0 + 0.20*30 + 0 = 6
        assert score_candidate(candidate, 1000) == 6

    def test_zero_max_uplift(self):
        """No candidate has uplift: impact contributes nothing."""
        candidate = make_candidate(action_type=ActionType.INVESTIGATE)
        # 0 + 20 + 10 + 16 = 46
        assert score_candidate(candidate, 0) == 46

    def test_tier_and_fit_tables(self):
        assert TIER_SCORES == {Tier.LOW: 20, Tier.MEDIUM: 60, Tier.HIGH: 100}
        assert STRATEGIC_FIT[ActionType.OPTIMIZE] > STRATEGIC_FIT[ActionType.CREATE]
        assert STRATEGIC_FIT[ActionType.INVESTIGATE] > STRATEGIC_FIT[ActionType.MONITOR]

    @pytest.mark.parametrize("impact,tier", [(100, Tier.HIGH), (66, Tier.HIGH), (65.9, Tier.MEDIUM),
                                             (33, Tier.MEDIUM), (32.9, Tier.LOW), (0, Tier.LOW)])
    def test_impact_tier(self, impact, tier):
        assert impact_tier(impact) == tier


class TestPrioritizeActions:
    """Test global ranking."""

    def test_empty(self):
        assert prioritize_actions([]) == []

    def test_ids_follow_rank(self):
        actions = prioritize_actions([
            make_candidate("small", uplift=10),
            make_candidate("big", uplift=1000),
        ])

        assert [a.title for a in actions] == ["big", "small"]
        assert [a.id for a in actions] == ["action-1", "action-2"]
        assert actions[0].impact == Tier.HIGH
        assert actions[1].impact == Tier.LOW
        assert actions[0].estimated_click_uplift == 1000

    def test_ties_broken_by_uplift_then_title(self):
        """Same score: higher uplift first, then alphabetical."""
        actions = prioritize_actions([
            make_candidate("b", action_type=ActionType.MONITOR),
            make_candidate("a", action_type=ActionType.MONITOR),
        ])
        assert [a.title for a in actions] == ["a", "b"]

    def test_negative_uplift_clamped(self):
        actions = prioritize_actions([make_candidate("odd", uplift=-50)])

        assert actions[0].estimated_click_uplift == 0
        assert 0 <= actions[0].priority_score <= 100

    @pytest.mark.parametrize("seed", range(20))
    def test_random_sets_bounded_and_ordered(self, seed):
        rng = random.Random(seed)
        candidates = random_candidates(rng, rng.randint(1, 40))

        actions = prioritize_actions(candidates)

        assert len(actions) == len(candidates)
        assert all(0 <= a.priority_score <= 100 for a in actions)
        assert all(a.estimated_click_uplift >= 0 for a in actions)
        keys = [(-a.priority_score, -a.estimated_click_uplift, a.title) for a in actions]
        assert keys == sorted(keys)
        assert [a.id for a in actions] == [f"action-{i}" for i in range(1, len(actions) + 1)]

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, seed):
        candidates = random_candidates(random.Random(seed), 25)
        first = [a.to_dict() for a in prioritize_actions(candidates)]
        second = [a.to_dict() for a in prioritize_actions(list(reversed(candidates)))]
        assert first == second
