"""
Industry Profile Catalog

The fixed, ordered list of industry verticals the analyzer knows about.

The catalog is built once per process (see get_catalog) and never mutated.
Each profile's keyword, technology and regulation patterns are compiled when
the catalog is built and reused by every classification call.

Declaration order matters only for tie-breaking in the classifier: when two
profiles score the same, the one declared first wins.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Pattern, Tuple

from .matching import compile_terms

logger = logging.getLogger(__name__)

CATALOG_VERSION = "2024.1"


# =============================================================================
# PROFILE MODEL
# =============================================================================


@dataclass(frozen=True)
class IndustryProfile:
    """One business vertical: its vocabulary, stack, regulations and KPIs."""
    id: str
    name: str
    description: str
    keywords: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()
    regulations: Tuple[str, ...] = ()
    kpis: Tuple[str, ...] = ()
    focus_areas: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords),
            "technologies": list(self.technologies),
            "regulations": list(self.regulations),
            "kpis": list(self.kpis),
            "focusAreas": list(self.focus_areas),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndustryProfile":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            keywords=tuple(data.get("keywords", ())),
            technologies=tuple(data.get("technologies", ())),
            regulations=tuple(data.get("regulations", ())),
            kpis=tuple(data.get("kpis", ())),
            focus_areas=tuple(data.get("focusAreas", ())),
        )


@dataclass(frozen=True)
class CompiledProfile:
    """Precompiled matchers for one profile."""
    profile: IndustryProfile
    keywords: Tuple[Tuple[str, Pattern], ...] = field(default=())
    technologies: Tuple[Tuple[str, Pattern], ...] = field(default=())
    regulations: Tuple[Tuple[str, Pattern], ...] = field(default=())

    @classmethod
    def build(cls, profile: IndustryProfile) -> "CompiledProfile":
        return cls(
            profile=profile,
            keywords=compile_terms(profile.keywords),
            technologies=compile_terms(profile.technologies),
            regulations=compile_terms(profile.regulations),
        )


# =============================================================================
# PROFILE DEFINITIONS
# =============================================================================

INDUSTRY_PROFILES: Tuple[IndustryProfile, ...] = (
    IndustryProfile(
        id="ecommerce",
        name="E-Commerce & Retail",
        description="Online shops, mobile commerce, payment systems",
        keywords=(
            "e-commerce", "online shop", "webshop", "conversion", "checkout",
            "payment", "warenkorb", "produktkatalog", "bestellung", "versand",
            "mobile commerce", "pwa", "personalisierung", "recommendation",
        ),
        technologies=(
            "React", "Angular", "Vue.js", "Next.js", "TypeScript", "Node.js",
            "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "Shopify",
            "Magento", "WooCommerce", "Stripe", "PayPal", "Kubernetes",
        ),
        regulations=("DSGVO", "PCI-DSS", "Cookie-Law", "Verbraucherschutz"),
        kpis=("Conversion Rate", "AOV", "CAC", "LTV", "Cart Abandonment", "Mobile Conversion"),
        focus_areas=("Mobile Experience", "Payment Integration", "Performance", "SEO"),
    ),
    IndustryProfile(
        id="healthcare",
        name="Healthcare & Medicine",
        description="Hospitals, medical practices, medical technology",
        keywords=(
            "patient", "krankenhaus", "arzt", "diagnose", "behandlung",
            "medizinische daten", "patientenakte", "telemedicine", "health app",
            "medical device", "klinik", "gesundheitswesen", "pharma",
        ),
        technologies=(
            "FHIR", "HL7", "DICOM", "Java Spring", "React", "Angular",
            "PostgreSQL", "MongoDB", "Docker", "Kubernetes", "AWS HIPAA",
            "Azure Healthcare", "Blockchain", "TensorFlow",
        ),
        regulations=("HIPAA", "DSGVO", "MDR", "FDA", "ISO 27001", "ISO 13485"),
        kpis=("Patient Satisfaction", "Treatment Time", "Error Rate", "Compliance Score"),
        focus_areas=("Data Security", "Compliance", "Interoperability", "User Safety"),
    ),
    IndustryProfile(
        id="fintech",
        name="Fintech & Banking",
        description="Payments, banking, blockchain, trading",
        keywords=(
            "payment", "banking", "fintech", "kreditkarte", "überweisung",
            "blockchain", "cryptocurrency", "trading", "investment",
            "robo advisor", "risk management", "fraud detection", "sepa",
        ),
        technologies=(
            "Java Spring Security", "Node.js", "React", "Angular", "PostgreSQL",
            "Redis", "Kafka", "Elasticsearch", "Kubernetes", "AWS", "Azure",
            "Blockchain", "TensorFlow", "Apache Spark",
        ),
        regulations=("PCI-DSS", "PSD2", "GDPR", "Basel III", "MiFID II", "AML"),
        kpis=("Transaction Volume", "Fraud Rate", "Compliance Score", "Customer Acquisition"),
        focus_areas=("Security", "Real-time Processing", "Fraud Prevention", "Compliance"),
    ),
    IndustryProfile(
        id="manufacturing",
        name="Manufacturing & Industry 4.0",
        description="Production, IoT, smart factory, automation",
        keywords=(
            "produktion", "fertigung", "industrie 4.0", "iot", "smart factory",
            "predictive maintenance", "quality control", "supply chain",
            "automation", "robotik", "sensor data", "machine learning",
        ),
        technologies=(
            "Java Spring", "Python", "React", "Angular", "TypeScript",
            "PostgreSQL", "InfluxDB", "MongoDB", "Kafka", "MQTT",
            "Docker", "Kubernetes", "AWS IoT", "Azure IoT", "TensorFlow",
        ),
        regulations=("ISO 9001", "ISO 14001", "REACH", "CE", "FDA"),
        kpis=("OEE", "Quality Rate", "Lead Time", "Energy Efficiency"),
        focus_areas=("IoT Integration", "Predictive Analytics", "Automation", "Quality Control"),
    ),
    IndustryProfile(
        id="automotive",
        name="Automotive & Mobility",
        description="Vehicle software, connected cars, suppliers",
        keywords=(
            "automotive", "fahrzeug", "kfz", "elektroauto", "mobility",
            "connected car", "autonomous driving", "infotainment", "telematics",
            "ota update", "fahrerassistenz", "zulieferer",
        ),
        technologies=(
            "AUTOSAR", "C++", "Python", "ROS", "CAN Bus", "QNX",
            "Android Automotive", "Kafka", "MQTT", "Kubernetes", "AWS IoT",
            "TensorFlow",
        ),
        regulations=("ISO 26262", "ISO/SAE 21434", "UNECE R155", "ASPICE", "DSGVO"),
        kpis=("Time to Market", "Defect Density", "OTA Success Rate", "Safety Coverage"),
        focus_areas=("Functional Safety", "Cybersecurity", "Connectivity", "Software-defined Vehicle"),
    ),
    IndustryProfile(
        id="it",
        name="IT & Software Development",
        description="Software products, cloud platforms, digital services",
        keywords=(
            "software", "entwicklung", "digital solutions", "cloud native",
            "dokumentenverwaltung", "ai integration", "security by design",
            "testautomatisierung", "skalierbar", "api", "devops", "saas",
        ),
        technologies=(
            "Angular", "Spring Boot", "Java", "PostgreSQL", "Elasticsearch",
            "Docker", "Kubernetes", "GitLab", "AWS", "Keycloak", "OAuth2",
            "JWT", "JUnit", "Cypress", "OpenAI",
        ),
        regulations=("GDPR", "ISO 27001", "SOC 2"),
        kpis=("System Uptime", "API Response Time", "Deployment Frequency", "User Satisfaction"),
        focus_areas=("Scalability", "Security", "Automation", "Maintainability"),
    ),
)


# =============================================================================
# CATALOG
# =============================================================================


class IndustryCatalog:
    """
    Immutable, ordered collection of industry profiles.

    Usage:
        catalog = get_catalog()
        for profile in catalog.all_profiles():
            ...
        fintech = catalog.profile_by_id("fintech")
    """

    def __init__(self, profiles: Iterable[IndustryProfile], version: str = CATALOG_VERSION):
        profiles = tuple(profiles)
        if not profiles:
            raise ValueError("Industry catalog must contain at least one profile")

        ids = [p.id for p in profiles]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate industry ids in catalog: {duplicates}")

        self._profiles = profiles
        self._by_id = {p.id: p for p in profiles}
        self._compiled = {p.id: CompiledProfile.build(p) for p in profiles}
        self.version = version

        logger.debug(f"Industry catalog {version} loaded with {len(profiles)} profiles")

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self):
        return iter(self._profiles)

    def all_profiles(self) -> Tuple[IndustryProfile, ...]:
        """All profiles in declaration order."""
        return self._profiles

    def profile_by_id(self, industry_id: str) -> Optional[IndustryProfile]:
        """Exact, case-sensitive lookup. Returns None for unknown ids."""
        return self._by_id.get(industry_id)

    def compiled(self, profile: IndustryProfile) -> CompiledProfile:
        """
        Precompiled matchers for a profile.

        Profiles that are not part of this catalog (e.g. ad-hoc profiles
        built by callers) are compiled on demand.
        """
        cached = self._compiled.get(profile.id)
        if cached is not None and cached.profile == profile:
            return cached
        return CompiledProfile.build(profile)

    def ids(self) -> List[str]:
        return [p.id for p in self._profiles]


@lru_cache
def get_catalog() -> IndustryCatalog:
    """Get or create the process-wide catalog."""
    return IndustryCatalog(INDUSTRY_PROFILES)


def all_profiles() -> Tuple[IndustryProfile, ...]:
    return get_catalog().all_profiles()


def profile_by_id(industry_id: str) -> Optional[IndustryProfile]:
    return get_catalog().profile_by_id(industry_id)
