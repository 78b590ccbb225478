"""Utility modules for the SearchShare insights engine."""

from .config import Settings, get_settings
from .text import (
    normalize_text,
    tokenize,
    contains_normalized,
    contains_any,
    names_overlap,
)

__all__ = [
    "Settings",
    "get_settings",
    # Text matching
    "normalize_text",
    "tokenize",
    "contains_normalized",
    "contains_any",
    "names_overlap",
]
