"""
Test Suite: Document Analysis Service

Tests the classify-and-synthesize workflow and its optional extras.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.analysis import InvalidInput
from src.services import (
    DocumentAnalysis,
    DocumentAnalysisService,
    classify_and_synthesize,
    get_analysis_service,
)


@pytest.fixture
def service(catalog):
    return DocumentAnalysisService(catalog)


class TestClassifyAndSynthesize:
    """Test the synchronous core path."""

    def test_auto_detection(self, service, healthcare_text):
        report = service.classify_and_synthesize(healthcare_text, "auto")
        assert report.detected_industry.id == "healthcare"
        assert 10 <= report.confidence <= 95

    def test_pinned_industry(self, service, healthcare_text):
        report = service.classify_and_synthesize(healthcare_text, "manufacturing")
        assert report.detected_industry.id == "manufacturing"
        assert report.confidence == 95

    def test_empty_text(self, service):
        report = service.classify_and_synthesize("", "auto")
        assert report.detected_industry.id == "ecommerce"
        assert report.confidence == 10
        assert report.keyword_categories.all == []
        assert report.recommendations.all
        assert report.success_metrics

    def test_tied_input_is_stable(self, service):
        first = service.classify_and_synthesize("payment")
        second = service.classify_and_synthesize("payment")
        assert first.detected_industry.id == second.detected_industry.id == "ecommerce"
        assert first == second

    def test_cloud_maturity_discount(self, service):
        modern = service.classify_and_synthesize("Kubernetes Docker microservices cloud", "it")
        plain = service.classify_and_synthesize("", "it")
        assert modern.risk_assessment.technical == plain.risk_assessment.technical - 1

    def test_gdpr_text_for_healthcare(self, service):
        report = service.classify_and_synthesize("All records are handled per GDPR", "healthcare")
        dsgvo = next(r for r in report.compliance_results if r.regulation == "DSGVO")
        assert dsgvo.relevance == "high"

    def test_invalid_input(self, service):
        with pytest.raises(InvalidInput):
            service.classify_and_synthesize(123)
        with pytest.raises(InvalidInput):
            service.classify_and_synthesize("text", "aerospace")

    def test_module_level_helpers(self, fintech_text):
        assert get_analysis_service() is get_analysis_service()
        report = classify_and_synthesize(fintech_text)
        assert report.detected_industry.id == "fintech"


@pytest.mark.asyncio
class TestAnalyze:
    """Test the full async workflow."""

    async def test_plain_analysis(self, service, it_text):
        analysis = await service.analyze(it_text)
        assert isinstance(analysis, DocumentAnalysis)
        assert analysis.preprocessing is None
        assert analysis.backend_comparison is None

        data = analysis.to_dict()
        assert data["detectedIndustry"]["id"] == "it"
        assert "preprocessing" not in data
        assert "backendComparison" not in data

    async def test_preprocessing(self, service):
        text = "Online   shop\r\n\r\n\r\n\r\nwith   checkout  "
        analysis = await service.analyze(text, preprocess=True)

        assert analysis.preprocessing is not None
        assert analysis.preprocessing.original_length == len(text)
        assert analysis.report.summary.startswith("E-Commerce & Retail project: Online shop with checkout...")
        assert "preprocessing" in analysis.to_dict()

    async def test_backend_receives_analyzed_text(self, service):
        backend = MagicMock()
        backend.compare = AsyncMock(return_value=None)

        analysis = await service.analyze("  banking  ", preprocess=True, backend=backend)

        backend.compare.assert_awaited_once_with("banking")
        assert analysis.backend_comparison is None
        assert analysis.report.detected_industry.id == "fintech"

    async def test_backend_comparison_is_attached(self, service):
        comparison = MagicMock()
        comparison.to_dict.return_value = {"shape": "flat"}
        backend = MagicMock()
        backend.compare = AsyncMock(return_value=comparison)

        analysis = await service.analyze("banking", backend=backend)

        assert analysis.backend_comparison is comparison
        assert analysis.to_dict()["backendComparison"] == {"shape": "flat"}
