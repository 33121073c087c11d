"""
Industry Classification Package

Fixed catalog of industry profiles and the keyword-weighted classifier.

Usage:
    from src.industry import detect_industry, profile_by_id

    result = detect_industry("Patient records and FHIR integration")
    print(f"{result.industry.name} ({result.confidence}%)")
"""

from .catalog import (
    CATALOG_VERSION,
    INDUSTRY_PROFILES,
    CompiledProfile,
    IndustryCatalog,
    IndustryProfile,
    all_profiles,
    get_catalog,
    profile_by_id,
)
from .classifier import (
    AUTO_INDUSTRY,
    ClassificationResult,
    IndustryClassifier,
    calculate_confidence,
    detect_industry,
)

__all__ = [
    "CATALOG_VERSION",
    "INDUSTRY_PROFILES",
    "CompiledProfile",
    "IndustryCatalog",
    "IndustryProfile",
    "all_profiles",
    "get_catalog",
    "profile_by_id",
    "AUTO_INDUSTRY",
    "ClassificationResult",
    "IndustryClassifier",
    "calculate_confidence",
    "detect_industry",
]
