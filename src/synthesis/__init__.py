"""
Report Synthesis Package

Turns input text plus an industry profile into a structured AnalysisReport.

Usage:
    from src.synthesis import ReportSynthesizer

    report = ReportSynthesizer().synthesize(text, classification)
    payload = report.to_dict()
"""

from .models import (
    AnalysisReport,
    BudgetEstimate,
    ComplianceResult,
    KeywordCategories,
    ProjectPhase,
    Recommendations,
    RiskAssessment,
    SuccessMetric,
    TechStack,
    TimelineEstimate,
)
from .keywords import categorize_keywords
from .recommendations import generate_recommendations
from .compliance import assess_compliance, assess_regulation, assess_risk, risk_mitigations
from .estimates import critical_path, estimate_budget, estimate_timeline, project_phases
from .stack import define_success_metrics, recommend_stack
from .summary import generate_summary
from .synthesizer import ReportSynthesizer

__all__ = [
    # Models
    "AnalysisReport",
    "BudgetEstimate",
    "ComplianceResult",
    "KeywordCategories",
    "ProjectPhase",
    "Recommendations",
    "RiskAssessment",
    "SuccessMetric",
    "TechStack",
    "TimelineEstimate",
    # Sub-algorithms
    "categorize_keywords",
    "generate_recommendations",
    "assess_compliance",
    "assess_regulation",
    "assess_risk",
    "risk_mitigations",
    "estimate_budget",
    "estimate_timeline",
    "project_phases",
    "critical_path",
    "recommend_stack",
    "define_success_metrics",
    "generate_summary",
    # Orchestration
    "ReportSynthesizer",
]
