"""
Persistence Layer

Provides storage for saved brand analyses.
"""

from .repository import AnalysisRepository, InMemoryAnalysisRepository, StoredAnalysis

__all__ = [
    "AnalysisRepository",
    "InMemoryAnalysisRepository",
    "StoredAnalysis",
]
