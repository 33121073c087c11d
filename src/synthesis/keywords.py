"""
Keyword Categorization

Splits the profile's catalog terms that occur in the text into technology,
business and compliance lists. Lists keep profile declaration order (not
text order), contain no duplicates and are capped.
"""

from typing import Optional

from ..industry.catalog import IndustryCatalog, IndustryProfile, get_catalog
from ..industry.matching import matched_terms
from .models import KeywordCategories
from .rules import MAX_BUSINESS_KEYWORDS, MAX_COMPLIANCE_KEYWORDS, MAX_TECHNOLOGY_KEYWORDS


def categorize_keywords(
    text: str,
    profile: IndustryProfile,
    catalog: Optional[IndustryCatalog] = None,
) -> KeywordCategories:
    compiled = (catalog or get_catalog()).compiled(profile)
    return KeywordCategories(
        technology=matched_terms(compiled.technologies, text, MAX_TECHNOLOGY_KEYWORDS),
        business=matched_terms(compiled.keywords, text, MAX_BUSINESS_KEYWORDS),
        compliance=matched_terms(compiled.regulations, text, MAX_COMPLIANCE_KEYWORDS),
    )
