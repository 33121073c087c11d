"""
Test Suite: HTTP API

Tests the FastAPI endpoints end to end.
"""

import pytest
from fastapi.testclient import TestClient

from api.analyze import app
from src.utils import get_settings


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def settings(monkeypatch):
    """Settings with the remote backend switched off."""
    current = get_settings()
    monkeypatch.setattr(current, "BACKEND_URL", None)
    monkeypatch.setattr(current, "ENABLE_BACKEND_COMPARISON", False)
    return current


class TestMetadataEndpoints:
    """Test health and catalog endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["service"] == "Document Industry Analyzer"

    def test_health(self, client, settings):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["industries"] == 6
        assert data["backend_configured"] is False

    def test_industries(self, client):
        response = client.get("/api/industries")
        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["industries"]]
        assert ids == ["ecommerce", "healthcare", "fintech", "manufacturing", "automotive", "it"]


class TestDetectIndustry:
    """Test POST /api/ai/detect-industry."""

    def test_detect(self, client):
        response = client.post(
            "/api/ai/detect-industry",
            json={"text": "Online shop with checkout and Stripe"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "industry": "ecommerce",
            "name": "E-Commerce & Retail",
            "confidence": 95,
        }

    def test_empty_text(self, client):
        response = client.post("/api/ai/detect-industry", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["confidence"] == 10

    def test_non_string_text(self, client):
        response = client.post("/api/ai/detect-industry", json={"text": 42})
        assert response.status_code == 422


class TestAnalyze:
    """Test POST /api/analyze."""

    def test_auto_detection(self, client, settings, fintech_text):
        response = client.post("/api/analyze", json={"text": fintech_text})
        assert response.status_code == 200
        data = response.json()
        assert data["detectedIndustry"]["id"] == "fintech"
        assert data["estimatedBudget"]["min"] <= data["estimatedBudget"]["max"]
        assert "preprocessing" not in data

    def test_pinned_industry(self, client, settings, fintech_text):
        response = client.post("/api/analyze", json={"text": fintech_text, "industry": "healthcare"})
        assert response.status_code == 200
        data = response.json()
        assert data["detectedIndustry"]["id"] == "healthcare"
        assert data["confidence"] == 95

    def test_unknown_industry(self, client, settings):
        response = client.post("/api/analyze", json={"text": "text", "industry": "aerospace"})
        assert response.status_code == 404

    def test_preprocess_flag(self, client, settings):
        response = client.post("/api/analyze", json={"text": "Banking  app", "preprocess": True})
        assert response.status_code == 200
        assert response.json()["preprocessing"]["processedLength"] == len("Banking app")

    def test_compare_without_backend(self, client, settings):
        response = client.post("/api/analyze", json={"text": "banking", "compare": True})
        assert response.status_code == 200
        assert "backendComparison" not in response.json()

    def test_text_too_long(self, client, settings, monkeypatch):
        monkeypatch.setattr(settings, "MAX_TEXT_LENGTH", 10)
        response = client.post("/api/analyze", json={"text": "x" * 11})
        assert response.status_code == 413


class TestPreprocessEndpoint:
    """Test POST /api/analyze/preprocess."""

    def test_preprocess(self, client):
        response = client.post("/api/analyze/preprocess", json={"text": "Hello \t world\r\n"})
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "Hello world"
        assert data["originalLength"] == 15
        assert data["processedLength"] == 11
