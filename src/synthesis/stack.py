"""
Tech Stack and Success Metrics

Both start from a fixed baseline and append the industry's supplement.
"""

from typing import List

from ..industry.catalog import IndustryProfile
from .models import SuccessMetric, TechStack
from .rules import BASE_METRICS, BASE_STACK, INDUSTRY_METRICS, STACK_SUPPLEMENTS


def recommend_stack(profile: IndustryProfile) -> TechStack:
    supplement = STACK_SUPPLEMENTS.get(profile.id, {})
    layers = {
        layer: [*items, *supplement.get(layer, [])]
        for layer, items in BASE_STACK.items()
    }
    return TechStack(**layers)


def define_success_metrics(profile: IndustryProfile) -> List[SuccessMetric]:
    rows = [*BASE_METRICS, *INDUSTRY_METRICS.get(profile.id, [])]
    return [
        SuccessMetric(name=name, current=current, target=target, improvement=improvement)
        for name, current, target, improvement in rows
    ]
