"""
Output Normalization Package

Converts external (remote backend) analysis responses into the canonical
AnalysisReport shape.

Usage:
    from src.output import normalize_backend_response

    report = normalize_backend_response(response.json(), text=document_text)
"""

from .converter import (
    INDUSTRY_ALIASES,
    BackendResponseConverter,
    ConversionResult,
    normalize_backend_response,
)

__all__ = [
    "INDUSTRY_ALIASES",
    "BackendResponseConverter",
    "ConversionResult",
    "normalize_backend_response",
]
