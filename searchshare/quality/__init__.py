"""
Quality Module

Validation of collaborator-supplied records before they enter the
calculation pipeline.
"""

from .validators import (
    InvalidRecordError,
    coerce_volume,
    coerce_position,
)

__all__ = [
    "InvalidRecordError",
    "coerce_volume",
    "coerce_position",
]
