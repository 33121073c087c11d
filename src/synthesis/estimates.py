"""
Budget and Timeline Estimation

Budget:
    complexity = min(3.0, 1 + len(text) / 10000)
    estimate   = 100000 × complexity × industry multiplier
    min, max   = round(estimate × 0.8), round(estimate × 1.3)

Timeline:
    complexity = min(2.0, 1 + len(text) / 15000)
    months     = round(base months × complexity)
"""

import logging
from typing import List

from ..industry.catalog import IndustryProfile
from ..industry.matching import round_half_up
from .models import BudgetEstimate, ProjectPhase, TimelineEstimate
from .rules import (
    BASE_BUDGET,
    BASE_TIMELINE_MONTHS,
    BUDGET_COMPLEXITY_CHARS,
    BUDGET_MAX_FACTOR,
    BUDGET_MIN_FACTOR,
    COMMON_PHASES,
    CRITICAL_PATH_INSERTS,
    CRITICAL_PATH_PREFIX,
    CRITICAL_PATH_SUFFIX,
    DEFAULT_BUDGET_MULTIPLIER,
    DEFAULT_TIMELINE_MONTHS,
    INDUSTRY_BUDGET_MULTIPLIERS,
    INDUSTRY_PHASES,
    MAX_BUDGET_COMPLEXITY,
    MAX_TIMELINE_COMPLEXITY,
    TIMELINE_COMPLEXITY_CHARS,
)

logger = logging.getLogger(__name__)


# ============================================================================
# BUDGET
# ============================================================================


def budget_complexity(text: str) -> float:
    return min(MAX_BUDGET_COMPLEXITY, 1 + len(text) / BUDGET_COMPLEXITY_CHARS)


def estimate_budget(text: str, profile: IndustryProfile) -> BudgetEstimate:
    multiplier = INDUSTRY_BUDGET_MULTIPLIERS.get(profile.id, DEFAULT_BUDGET_MULTIPLIER)
    complexity = budget_complexity(text)
    estimated = BASE_BUDGET * complexity * multiplier

    logger.debug(f"Budget for {profile.id}: {estimated:.0f} (x{multiplier}, complexity {complexity:.2f})")

    return BudgetEstimate(
        min=round_half_up(estimated * BUDGET_MIN_FACTOR),
        max=round_half_up(estimated * BUDGET_MAX_FACTOR),
        confidence="medium",
        factors=[
            f"Industry: {profile.name} ({multiplier:g}x)",
            f"Complexity: {complexity:.1f}x",
            "Compliance requirements considered",
            "Security standards included",
        ],
    )


# ============================================================================
# TIMELINE
# ============================================================================


def timeline_complexity(text: str) -> float:
    return min(MAX_TIMELINE_COMPLEXITY, 1 + len(text) / TIMELINE_COMPLEXITY_CHARS)


def project_phases(profile: IndustryProfile) -> List[ProjectPhase]:
    """Common phases, with the industry's extra phase after Core Development."""
    phases = [
        ProjectPhase(name=name, duration=duration, dependencies=list(deps), deliverables=list(items))
        for name, duration, deps, items in COMMON_PHASES
    ]

    extra = INDUSTRY_PHASES.get(profile.id)
    if extra:
        name, duration, deps, items = extra
        insert_at = next(
            (i + 1 for i, p in enumerate(phases) if p.name == "Core Development"),
            len(phases),
        )
        phases.insert(
            insert_at,
            ProjectPhase(name=name, duration=duration, dependencies=list(deps), deliverables=list(items)),
        )

    return phases


def critical_path(profile: IndustryProfile) -> List[str]:
    return [
        *CRITICAL_PATH_PREFIX,
        *CRITICAL_PATH_INSERTS.get(profile.id, []),
        *CRITICAL_PATH_SUFFIX,
    ]


def estimate_timeline(text: str, profile: IndustryProfile) -> TimelineEstimate:
    base_months = BASE_TIMELINE_MONTHS.get(profile.id, DEFAULT_TIMELINE_MONTHS)
    return TimelineEstimate(
        estimated=round_half_up(base_months * timeline_complexity(text)),
        phases=project_phases(profile),
        critical_path=critical_path(profile),
    )
