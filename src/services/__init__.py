"""
Services Layer

Business logic services that orchestrate classification, synthesis and
the optional remote comparison.
"""

from .analysis import (
    DocumentAnalysis,
    DocumentAnalysisService,
    classify_and_synthesize,
    get_analysis_service,
)

__all__ = [
    "DocumentAnalysis",
    "DocumentAnalysisService",
    "classify_and_synthesize",
    "get_analysis_service",
]
