"""
Scoring Helper Functions and Constants

Contains the CTR curve, visibility estimation and small numeric utilities
used across the metrics calculator and the insight detectors.
"""

import math
from typing import Dict, List, Optional


# ============================================================================
# CTR CURVE
# ============================================================================

CTR_CURVE: Dict[int, float] = {
    1: 0.28,    # 28% CTR for position 1
    2: 0.15,    # 15%
    3: 0.09,    # 9%
    4: 0.06,    # 6%
    5: 0.04,    # 4%
    6: 0.03,    # 3%
    7: 0.025,   # 2.5%
    8: 0.02,    # 2%
    9: 0.018,   # 1.8%
    10: 0.015,  # 1.5%
}

# Last position with a non-zero CTR
MAX_VISIBLE_POSITION = 20


def get_ctr_for_position(position: Optional[int]) -> float:
    """
    Get estimated CTR for a SERP position.

    Args:
        position: SERP position (None if not ranking)

    Returns:
        Estimated CTR as decimal (0.0 - 1.0)
    """
    if position is None or position <= 0:
        return 0.0
    if position <= 10:
        return CTR_CURVE[position]
    if position <= MAX_VISIBLE_POSITION:
        # Page 2: tapers from 1.0% at #11 to 0.55% at #20
        return round(0.01 - (position - 11) * 0.0005, 4)
    # Page 3+: treated as invisible
    return 0.0


def estimate_visible_volume(volume: int, position: Optional[int]) -> float:
    """Expected monthly clicks for a keyword at a position (unrounded)."""
    return volume * get_ctr_for_position(position)


def estimate_traffic_potential(
    volume: int,
    current_position: Optional[int],
    target_position: int = 3
) -> int:
    """
    Estimate monthly click gain from a ranking improvement.

    Args:
        volume: Monthly search volume
        current_position: Current position (None if not ranking)
        target_position: Target position (default: 3)

    Returns:
        Estimated monthly click gain (never negative)
    """
    target_ctr = get_ctr_for_position(target_position)
    current_ctr = get_ctr_for_position(current_position)
    return max(0, round(volume * (target_ctr - current_ctr)))


# ============================================================================
# AGGREGATION HELPERS
# ============================================================================

def share(part: float, total: float) -> float:
    """Percentage of ``part`` in ``total`` with one decimal; 0 when total is 0."""
    if total <= 0:
        return 0.0
    return round(part / total * 100, 1)


def percentile(values: List[float], p: float) -> float:
    """
    Calculate percentile value.

    Args:
        values: List of numeric values
        p: Percentile (0-100)

    Returns:
        Value at percentile
    """
    if not values:
        return 0.0

    sorted_values = sorted(values)
    k = (len(sorted_values) - 1) * (p / 100)
    f = math.floor(k)
    c = math.ceil(k)

    if f == c:
        return sorted_values[int(k)]

    return sorted_values[int(f)] * (c - k) + sorted_values[int(c)] * (k - f)
