"""
Term Matching Helpers

Catalog terms are matched literally (regex-escaped), case-insensitively and
on word boundaries. Terms such as "C++", "PCI-DSS" or "Vue.js" start or end
with non-word characters, so boundaries are expressed as lookarounds rather
than \\b, which would never match after a trailing "+".
"""

import math
import re
from typing import Iterable, List, Optional, Pattern, Tuple

_WORD_SPLIT = re.compile(r"\s+")


def compile_term(term: str) -> Pattern:
    """Compile a catalog term into a literal, case-insensitive, word-bounded pattern."""
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def compile_terms(terms: Iterable[str]) -> Tuple[Tuple[str, Pattern], ...]:
    """Compile terms once, keeping declaration order."""
    return tuple((term, compile_term(term)) for term in terms)


def count_matches(pattern: Pattern, text: str) -> int:
    """Number of non-overlapping matches of a compiled term in text."""
    return sum(1 for _ in pattern.finditer(text))


def matched_terms(
    compiled: Tuple[Tuple[str, Pattern], ...],
    text: str,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Terms that occur in text, in declaration order, deduplicated.

    Args:
        compiled: (term, pattern) pairs from compile_terms()
        text: Input text
        limit: Optional cap on the number of returned terms

    Returns:
        List of matched terms (catalog spelling, not text spelling)
    """
    found = []
    seen = set()
    for term, pattern in compiled:
        key = term.lower()
        if key in seen:
            continue
        if pattern.search(text):
            seen.add(key)
            found.append(term)
            if limit is not None and len(found) >= limit:
                break
    return found


def word_count(text: str) -> int:
    """Whitespace-delimited word count, never below 1."""
    return max(1, len([w for w in _WORD_SPLIT.split(text) if w]))


def contains_any(text: str, needles: Iterable[str]) -> bool:
    """Plain substring test against lower-cased text."""
    lowered = text.lower()
    return any(needle in lowered for needle in needles)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))
