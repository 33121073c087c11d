"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import pytest

from src.industry import IndustryClassifier, IndustryProfile, get_catalog
from src.synthesis import ReportSynthesizer


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def catalog():
    """The process-wide industry catalog."""
    return get_catalog()


@pytest.fixture
def classifier(catalog):
    return IndustryClassifier(catalog)


@pytest.fixture
def synthesizer(catalog):
    return ReportSynthesizer(catalog)


@pytest.fixture
def profile(catalog):
    """Look up a catalog profile by id."""
    def _profile(industry_id: str) -> IndustryProfile:
        found = catalog.profile_by_id(industry_id)
        assert found is not None, f"Unknown industry in test: {industry_id}"
        return found
    return _profile


@pytest.fixture
def adhoc_profile() -> IndustryProfile:
    """A profile that no rule table knows about."""
    return IndustryProfile(
        id="legal",
        name="Legal Services",
        description="Law firms and contract management",
        keywords=("contract", "litigation"),
        technologies=("SharePoint",),
        regulations=("DSGVO",),
        kpis=("Billable Hours",),
        focus_areas=("Document Management",),
    )


# ============================================================================
# Sample Documents
# ============================================================================

@pytest.fixture
def ecommerce_text() -> str:
    return (
        "Relaunch of our online shop\n"
        "The new webshop needs a faster checkout, mobile conversion tracking\n"
        "and payment via Stripe and PayPal. Built with React and Next.js.\n"
        "Page speed and performance are a priority."
    )


@pytest.fixture
def healthcare_text() -> str:
    return (
        "Patient portal for a Krankenhaus\n"
        "Doctors and patient records are synchronized over FHIR and HL7.\n"
        "All data handling must follow GDPR."
    )


@pytest.fixture
def fintech_text() -> str:
    return (
        "Banking platform with SEPA transfers, fraud detection and trading.\n"
        "Event streaming runs on Kafka, risk management dashboards in Angular."
    )


@pytest.fixture
def it_text() -> str:
    return (
        "SaaS software for document management with an API for partners.\n"
        "Deployed on Kubernetes with Docker images, microservices in the cloud.\n"
        "DevOps pipeline in GitLab, login via Keycloak."
    )


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise several layers together"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
