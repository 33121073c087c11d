"""
External API Integrations

Client for the optional remote analysis backend, used for side-by-side
comparison with the local engine.
"""

from .backend import (
    BackendComparison,
    BackendComparisonClient,
    BackendComparisonError,
)

__all__ = [
    "BackendComparison",
    "BackendComparisonClient",
    "BackendComparisonError",
]
