"""
SearchShare Insights Engine

A brand visibility analysis library that:
1. Calculates Share of Search, Share of Voice and the Growth Gap
2. Classifies keywords into categories and flags branded terms
3. Detects quick wins, hidden gems, cannibalization and content gaps
4. Ranks every recommendation in one prioritized action list
"""

__version__ = "0.1.0"

from .insights import generate_actionable_insights, run_analysis
from .scoring import calculate_metrics

__all__ = [
    "__version__",
    "calculate_metrics",
    "generate_actionable_insights",
    "run_analysis",
]
