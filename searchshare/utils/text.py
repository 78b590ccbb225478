"""
Text Normalization Helpers

One place for the fuzzy string matching used by brand detection and
intent grouping: lowercase, strip everything that is not a letter or digit,
then check containment in both directions.
"""

import re
from typing import Iterable, List

_NON_ALNUM = re.compile(r"[^\w]|_", re.UNICODE)
_TOKEN_SPLIT = re.compile(r"[^\w]+|_", re.UNICODE)

# Function words that carry no intent on their own
STOPWORDS = frozenset({
    "a", "an", "and", "for", "in", "of", "on", "or", "the", "to", "with",
    "der", "die", "das", "und", "für", "mit", "von", "im",
    "le", "la", "les", "de", "des", "et", "el", "los", "y",
})


def normalize_text(value: str) -> str:
    """Lowercase and drop every non-alphanumeric character."""
    if not value:
        return ""
    return _NON_ALNUM.sub("", value.lower())


def tokenize(value: str, min_length: int = 1) -> List[str]:
    """Split text into lowercase alphanumeric tokens, dropping stopwords."""
    if not value:
        return []
    tokens = [t for t in _TOKEN_SPLIT.split(value.lower()) if t]
    return [t for t in tokens if len(t) >= min_length and t not in STOPWORDS]


def contains_normalized(haystack: str, needle: str) -> bool:
    """True if normalized ``needle`` occurs inside normalized ``haystack``."""
    needle_norm = normalize_text(needle)
    if not needle_norm:
        return False
    return needle_norm in normalize_text(haystack)


def names_overlap(a: str, b: str) -> bool:
    """
    Bidirectional substring check on normalized strings.

    "Dr. Hauschka" overlaps "drhauschka", "shampoo" overlaps "shampoos".
    Empty strings never overlap.
    """
    a_norm = normalize_text(a)
    b_norm = normalize_text(b)
    if not a_norm or not b_norm:
        return False
    return a_norm in b_norm or b_norm in a_norm


def contains_any(haystack: str, needles: Iterable[str]) -> bool:
    """True if any of ``needles`` is contained in ``haystack``."""
    return any(contains_normalized(haystack, n) for n in needles)
