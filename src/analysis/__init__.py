"""
Analysis Support Package

Input contract errors and text preprocessing shared by the classifier,
the synthesizer and the API layer.
"""

from .errors import InvalidInput, require_text
from .preprocessing import (
    PreprocessingResult,
    analyze_text_quality,
    build_preprocessing_result,
    count_technical_terms,
    detect_language,
    extract_frequent_terms,
    preprocess_text,
    readability_score,
)

__all__ = [
    "InvalidInput",
    "require_text",
    "PreprocessingResult",
    "analyze_text_quality",
    "build_preprocessing_result",
    "count_technical_terms",
    "detect_language",
    "extract_frequent_terms",
    "preprocess_text",
    "readability_score",
]
