"""
Document Analysis Service

Orchestrates the analysis workflow:
1. Optional text preprocessing
2. Industry classification (skipped when the caller pins an industry)
3. Report synthesis
4. Optional comparison call to the remote backend

The core path (classify_and_synthesize) is synchronous and pure: it reads
only the immutable catalog and caller-local input, so it can be called from
any number of concurrent requests without coordination.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.analysis.errors import require_text
from src.analysis.preprocessing import (
    PreprocessingResult,
    build_preprocessing_result,
    preprocess_text,
)
from src.industry.catalog import IndustryCatalog, get_catalog
from src.industry.classifier import ClassificationResult, IndustryClassifier
from src.integrations.backend import BackendComparison, BackendComparisonClient
from src.synthesis import AnalysisReport, ReportSynthesizer

logger = logging.getLogger(__name__)


@dataclass
class DocumentAnalysis:
    """Local report plus the optional extras requested by the caller."""
    report: AnalysisReport
    preprocessing: Optional[PreprocessingResult] = None
    backend_comparison: Optional[BackendComparison] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.report.to_dict()
        if self.preprocessing is not None:
            data["preprocessing"] = self.preprocessing.to_dict()
        if self.backend_comparison is not None:
            data["backendComparison"] = self.backend_comparison.to_dict()
        return data


class DocumentAnalysisService:
    """
    Front door for document analysis.

    Usage:
        service = DocumentAnalysisService()
        report = service.classify_and_synthesize(text, "auto")

        # With preprocessing and a remote comparison
        analysis = await service.analyze(text, preprocess=True, backend=client)
    """

    def __init__(self, catalog: Optional[IndustryCatalog] = None):
        self.catalog = catalog or get_catalog()
        self.classifier = IndustryClassifier(self.catalog)
        self.synthesizer = ReportSynthesizer(self.catalog)

    def classify(self, text: str, selected_industry: Optional[str] = None) -> ClassificationResult:
        return self.classifier.classify(text, selected_industry)

    def classify_and_synthesize(
        self,
        text: str,
        selected_industry: Optional[str] = None,
    ) -> AnalysisReport:
        """
        Classify text (unless pinned) and derive the full report.

        Args:
            text: Free-form document text
            selected_industry: Catalog id, "auto" or None

        Returns:
            AnalysisReport

        Raises:
            InvalidInput: text is not a string or the pinned id is unknown
        """
        text = require_text(text)
        classification = self.classifier.classify(text, selected_industry)
        return self.synthesizer.synthesize(text, classification)

    async def analyze(
        self,
        text: str,
        selected_industry: Optional[str] = None,
        preprocess: bool = False,
        backend: Optional[BackendComparisonClient] = None,
    ) -> DocumentAnalysis:
        """
        Full workflow used by the API.

        The remote comparison never affects the local report; if the backend
        is down, backend_comparison is simply None.
        """
        text = require_text(text)

        preprocessing = None
        analyzed_text = text
        if preprocess:
            analyzed_text = preprocess_text(text)
            preprocessing = build_preprocessing_result(text, analyzed_text)

        report = self.classify_and_synthesize(analyzed_text, selected_industry)

        comparison = None
        if backend is not None:
            comparison = await backend.compare(analyzed_text)

        return DocumentAnalysis(
            report=report,
            preprocessing=preprocessing,
            backend_comparison=comparison,
        )


_default_service: Optional[DocumentAnalysisService] = None


def get_analysis_service() -> DocumentAnalysisService:
    """Get or create the shared service instance."""
    global _default_service
    if _default_service is None:
        _default_service = DocumentAnalysisService()
    return _default_service


def classify_and_synthesize(text: str, selected_industry: Optional[str] = None) -> AnalysisReport:
    """Analyze text with the process-wide catalog."""
    return get_analysis_service().classify_and_synthesize(text, selected_industry)
