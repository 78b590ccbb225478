"""
Input Records

Typed records supplied by the brand-keyword and ranking collaborators.
Both validate their numeric fields on construction, so malformed provider
data fails at the boundary instead of inside a percentage.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..quality.validators import InvalidRecordError, coerce_position, coerce_volume


def _first_present(payload: Dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in payload."""
    for key in keys:
        if key in payload:
            return payload[key]
    return None


@dataclass
class BrandVolumeRecord:
    """One brand's aggregate branded-search demand."""
    brand_label: str
    search_volume: int
    is_own_brand: bool = False

    def __post_init__(self):
        self.search_volume = coerce_volume(self.search_volume, self.brand_label)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], index: Optional[int] = None) -> "BrandVolumeRecord":
        """
        Build from a provider payload.

        Accepts snake_case keys or the camelCase keys of the dashboard API
        (``brandLabel``/``keyword``, ``searchVolume``, ``isOwnBrand``).
        """
        if not isinstance(payload, dict):
            raise InvalidRecordError("record", payload, f"#{index}" if index is not None else None)

        label = _first_present(payload, "brand_label", "brandLabel", "keyword", "brand")
        label = str(label).strip() if label is not None else (f"#{index}" if index is not None else "")
        return cls(
            brand_label=label,
            search_volume=_first_present(
                payload, "search_volume", "searchVolume", "monthlySearchVolume", "volume"
            ),
            is_own_brand=bool(_first_present(payload, "is_own_brand", "isOwnBrand")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_label": self.brand_label,
            "search_volume": self.search_volume,
            "is_own_brand": self.is_own_brand,
        }


@dataclass
class RankedKeywordRecord:
    """
    One tracked keyword with the brand's current ranking.

    ``category`` and ``is_branded`` are filled in by the keyword classifier;
    a provider-supplied category is kept as is.
    """
    keyword: str
    search_volume: int
    position: Optional[int] = None
    url: str = ""
    category: Optional[str] = None
    is_branded: bool = False

    def __post_init__(self):
        self.search_volume = coerce_volume(self.search_volume, self.keyword)
        self.position = coerce_position(self.position, self.keyword)
        self.url = (self.url or "").strip()

    @property
    def is_ranked(self) -> bool:
        return self.position is not None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], index: Optional[int] = None) -> "RankedKeywordRecord":
        """
        Build from a provider payload.

        Accepts snake_case keys or the camelCase keys of the dashboard API
        (``keyword``/``keywordText``, ``searchVolume``, ``position``/``rankPosition``,
        ``url``/``landingUrl``).
        """
        if not isinstance(payload, dict):
            raise InvalidRecordError("record", payload, f"#{index}" if index is not None else None)

        keyword = _first_present(payload, "keyword", "keyword_text", "keywordText")
        keyword = str(keyword).strip() if keyword is not None else (f"#{index}" if index is not None else "")
        return cls(
            keyword=keyword,
            search_volume=_first_present(
                payload, "search_volume", "searchVolume", "monthlySearchVolume", "volume"
            ),
            position=_first_present(payload, "position", "rank_position", "rankPosition"),
            url=_first_present(payload, "url", "landing_url", "landingUrl") or "",
            category=_first_present(payload, "category") or None,
            is_branded=bool(_first_present(payload, "is_branded", "isBranded")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "search_volume": self.search_volume,
            "position": self.position,
            "url": self.url,
            "category": self.category,
            "is_branded": self.is_branded,
        }


def brand_volumes_from_payload(items: Iterable[Dict[str, Any]]) -> List[BrandVolumeRecord]:
    """Parse a list of brand volume payloads, failing on the first bad record."""
    return [BrandVolumeRecord.from_dict(item, i) for i, item in enumerate(items)]


def ranked_keywords_from_payload(items: Iterable[Dict[str, Any]]) -> List[RankedKeywordRecord]:
    """Parse a list of ranked keyword payloads, failing on the first bad record."""
    return [RankedKeywordRecord.from_dict(item, i) for i, item in enumerate(items)]
