"""
Record Validators

Validates the numeric fields of collaborator-supplied records before any
calculation sees them.

Structurally required numbers (search volume, rank position) that are not
numbers at all are a contract violation from the data provider: coercing
them would silently skew every percentage and ranking downstream, so they
raise InvalidRecordError naming the offending record. Everything else
degrades gracefully: negative volumes clamp to zero and fractional
positions round to the nearest rank (both logged as warnings), while
non-positive positions count as "not ranking".
"""

import logging
import math
from numbers import Real
from typing import Any, Optional

logger = logging.getLogger(__name__)


class InvalidRecordError(ValueError):
    """A required numeric field holds a non-numeric value."""

    def __init__(self, field: str, value: Any, record: Optional[str] = None):
        self.field = field
        self.value = value
        self.record = record
        where = f"record '{record}'" if record else "record"
        super().__init__(
            f"Invalid {field} for {where}: expected a number, got {value!r}"
        )


def _is_number(value: Any) -> bool:
    """Real numbers only; bools and NaN/inf are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def coerce_volume(value: Any, record: Optional[str] = None) -> int:
    """
    Validate a monthly search volume.

    Args:
        value: Raw volume from the provider
        record: Record label used in error messages

    Returns:
        Whole, non-negative volume

    Raises:
        InvalidRecordError: If the volume is missing or non-numeric
    """
    if not _is_number(value):
        raise InvalidRecordError("search_volume", value, record)

    volume = int(value)
    if volume < 0:
        logger.warning(f"Negative search volume {value} for '{record}', using 0")
        return 0
    return volume


def coerce_position(value: Any, record: Optional[str] = None) -> Optional[int]:
    """
    Validate a SERP rank position.

    Args:
        value: Raw position (None when the keyword does not rank)
        record: Record label used in error messages

    Returns:
        Positive integer position, or None when not ranking.
        Fractional positions (e.g. averaged ranks) round to the nearest rank.

    Raises:
        InvalidRecordError: If the position is present but non-numeric
    """
    if value is None:
        return None
    if not _is_number(value):
        raise InvalidRecordError("position", value, record)

    position = int(value)
    if position != value:
        position = math.floor(value + 0.5)
        logger.warning(f"Fractional position {value} for '{record}', using {position}")
    if position <= 0:
        logger.debug(f"Non-positive position {value} for '{record}', treating as unranked")
        return None
    return position
