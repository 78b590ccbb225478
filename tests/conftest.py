"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import pytest
from typing import List

from searchshare.models import BrandVolumeRecord, RankedKeywordRecord
from searchshare.sample_data import sample_brand_volumes, sample_ranked_keywords
from searchshare.utils.config import Settings


# ============================================================================
# Settings
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Default thresholds, independent of the test environment."""
    return Settings(_env_file=None)


# ============================================================================
# Record Fixtures
# ============================================================================

@pytest.fixture
def brand_volumes() -> List[BrandVolumeRecord]:
    """Sample natural-cosmetics market brand volumes."""
    return sample_brand_volumes()


@pytest.fixture
def ranked_keywords() -> List[RankedKeywordRecord]:
    """Sample natural-cosmetics market rankings."""
    return sample_ranked_keywords()


@pytest.fixture
def make_keyword():
    """Factory for ranked keyword records with sensible defaults."""
    def _make(keyword, search_volume=1000, position=None, url="", category=None, is_branded=False):
        return RankedKeywordRecord(
            keyword=keyword,
            search_volume=search_volume,
            position=position,
            url=url,
            category=category,
            is_branded=is_branded,
        )
    return _make
