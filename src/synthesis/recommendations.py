"""
Recommendation Generation

Maps an industry to prioritized directives using RECOMMENDATION_RULES.
Rules with trigger substrings only fire when one of the triggers appears in
the lower-cased text. Unknown industries get empty buckets.
"""

import logging

from ..industry.catalog import IndustryProfile
from .models import Recommendations
from .rules import LOW_PRIORITY_RECOMMENDATIONS, RECOMMENDATION_RULES

logger = logging.getLogger(__name__)


def generate_recommendations(text: str, profile: IndustryProfile) -> Recommendations:
    lowered = text.lower()
    high, medium = [], []

    for triggers, high_items, medium_items in RECOMMENDATION_RULES.get(profile.id, []):
        if triggers and not any(t in lowered for t in triggers):
            continue
        high.extend(high_items)
        medium.extend(medium_items)

    low = list(LOW_PRIORITY_RECOMMENDATIONS.get(profile.id, []))

    if not (high or medium or low):
        logger.debug(f"No recommendation rules for industry {profile.id}")

    return Recommendations(high=high, medium=medium, low=low)
