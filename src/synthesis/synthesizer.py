"""
Report Synthesizer

Derives a complete AnalysisReport from input text and an industry profile.
Each section is produced by an independent, pure sub-algorithm:

    keywords.py         keyword categories
    recommendations.py  prioritized directives
    compliance.py       compliance results and risk scores
    estimates.py        budget and timeline
    stack.py            tech stack and success metrics
    summary.py          text summary

Usage:
    synthesizer = ReportSynthesizer()
    report = synthesizer.synthesize(text, classification)
"""

import logging
from typing import Optional

from ..analysis.errors import require_text
from ..industry.catalog import IndustryCatalog, IndustryProfile, get_catalog
from ..industry.classifier import ClassificationResult
from .compliance import assess_compliance, assess_risk
from .estimates import estimate_budget, estimate_timeline
from .keywords import categorize_keywords
from .models import AnalysisReport
from .recommendations import generate_recommendations
from .stack import define_success_metrics, recommend_stack
from .summary import generate_summary

logger = logging.getLogger(__name__)


class ReportSynthesizer:
    """Builds AnalysisReports. Holds no state beyond the read-only catalog."""

    def __init__(self, catalog: Optional[IndustryCatalog] = None):
        self.catalog = catalog or get_catalog()

    def synthesize(self, text: str, classification: ClassificationResult) -> AnalysisReport:
        return self.synthesize_for(text, classification.industry, classification.confidence)

    def synthesize_for(self, text: str, profile: IndustryProfile, confidence: int) -> AnalysisReport:
        """
        Build a report for an explicit profile and confidence.

        Args:
            text: Input text
            profile: Industry profile to derive the report from
            confidence: Classification confidence (10-95)

        Returns:
            AnalysisReport
        """
        text = require_text(text)

        report = AnalysisReport(
            detected_industry=profile,
            confidence=confidence,
            summary=generate_summary(text, profile),
            keyword_categories=categorize_keywords(text, profile, self.catalog),
            recommendations=generate_recommendations(text, profile),
            estimated_budget=estimate_budget(text, profile),
            timeline=estimate_timeline(text, profile),
            recommended_stack=recommend_stack(profile),
            success_metrics=define_success_metrics(profile),
            compliance_results=assess_compliance(text, profile),
            risk_assessment=assess_risk(text, profile),
        )

        logger.info(
            f"Report synthesized for {profile.id}: "
            f"{len(report.keyword_categories.all)} keywords, "
            f"{len(report.recommendations.all)} recommendations, "
            f"overall risk {report.risk_assessment.overall}"
        )
        return report
