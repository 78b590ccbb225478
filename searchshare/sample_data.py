"""
Sample Dataset

A German natural-cosmetics market (lavera against four competitors) used
by the demo endpoint, the CLI default run and the test-suite.

Functions return fresh records on every call, since classification
enriches records in place.
"""

from typing import Any, Dict, List

from .models import BrandVolumeRecord, RankedKeywordRecord

SAMPLE_BRAND_NAME = "lavera"
SAMPLE_DOMAIN = "lavera.de"

SAMPLE_BRAND_KEYWORDS: List[Dict[str, Any]] = [
    {"keyword": "lavera", "search_volume": 12100, "is_own_brand": True},
    {"keyword": "lavera naturkosmetik", "search_volume": 1300, "is_own_brand": True},
    {"keyword": "lavera lippenstift", "search_volume": 480, "is_own_brand": True},
    {"keyword": "weleda", "search_volume": 18100, "is_own_brand": False},
    {"keyword": "dr hauschka", "search_volume": 14800, "is_own_brand": False},
    {"keyword": "annemarie börlind", "search_volume": 5400, "is_own_brand": False},
    {"keyword": "alverde", "search_volume": 27100, "is_own_brand": False},
]

SAMPLE_RANKED_KEYWORDS: List[Dict[str, Any]] = [
    {"keyword": "naturkosmetik", "search_volume": 22200, "position": 4, "url": "/naturkosmetik"},
    {"keyword": "bio gesichtscreme", "search_volume": 3600, "position": 2, "url": "/gesichtspflege"},
    {"keyword": "vegane kosmetik", "search_volume": 4400, "position": 3, "url": "/vegan"},
    {"keyword": "natürliche hautpflege", "search_volume": 2900, "position": 1, "url": "/hautpflege"},
    {"keyword": "bio lippenstift", "search_volume": 1900, "position": 5, "url": "/lippen"},
    {"keyword": "naturkosmetik gesicht", "search_volume": 2400, "position": 6, "url": "/gesicht"},
    {"keyword": "bio shampoo", "search_volume": 5400, "position": 8, "url": "/haarpflege"},
    {"keyword": "naturkosmetik marken", "search_volume": 1600, "position": 2, "url": "/marken"},
    {"keyword": "zertifizierte naturkosmetik", "search_volume": 880, "position": 1, "url": "/zertifiziert"},
    {"keyword": "bio bodylotion", "search_volume": 1300, "position": 7, "url": "/koerperpflege"},
    # Demand the brand does not capture yet
    {"keyword": "sonnencreme", "search_volume": 27100, "position": None, "url": ""},
    {"keyword": "mascara", "search_volume": 14800, "position": None, "url": ""},
    {"keyword": "sonnencreme kinder", "search_volume": 6600, "position": None, "url": ""},
    {"keyword": "spf 50 gesicht", "search_volume": 2900, "position": 34, "url": "/sonnenschutz"},
]


def sample_brand_volumes() -> List[BrandVolumeRecord]:
    """Brand volume records for the sample market."""
    return [BrandVolumeRecord.from_dict(item, i) for i, item in enumerate(SAMPLE_BRAND_KEYWORDS)]


def sample_ranked_keywords() -> List[RankedKeywordRecord]:
    """Ranked keyword records for the sample market."""
    return [RankedKeywordRecord.from_dict(item, i) for i, item in enumerate(SAMPLE_RANKED_KEYWORDS)]
