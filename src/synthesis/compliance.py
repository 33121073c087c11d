"""
Compliance and Risk Assessment

Compliance:
    relevance = high    if any regulation keyword matches
              = medium  if the regulation name appears in the text
              = low     otherwise
    risk_level = medium if the regulation name appears, else high.
    A regulation that is never discussed is the riskier case.

Risk (each clamped to 1-10):
    security   = 3 (+2 healthcare/fintech) (-1 "encryption"/"security")
    compliance = 4 (+2 more than two regulations) (-1 "compliance"/"audit")
    technical  = 3 (+1 text over 10k chars) (-1 kubernetes/docker/microservices/cloud)
    overall    = max of the three
"""

import logging
from typing import List

from ..industry.catalog import IndustryProfile
from ..industry.matching import clamp, compile_terms, contains_any, matched_terms
from .models import ComplianceResult, RiskAssessment
from .rules import (
    COMPLIANCE_MENTIONS,
    COMPLIANCE_RISK_BASE,
    HIGH_SECURITY_INDUSTRIES,
    LARGE_DOCUMENT_CHARS,
    MODERN_TECH_MENTIONS,
    REGULATION_KEYWORDS,
    REGULATION_REQUIREMENTS,
    RISK_ALERT_THRESHOLD,
    RISK_MAX,
    RISK_MIN,
    RISK_MITIGATIONS,
    SECURITY_MENTIONS,
    SECURITY_RISK_BASE,
    TECHNICAL_RISK_BASE,
)

logger = logging.getLogger(__name__)

# Compiled once at import; the regulation tables are static
_REGULATION_PATTERNS = {
    regulation: compile_terms(keywords)
    for regulation, keywords in REGULATION_KEYWORDS.items()
}


# =============================================================================
# COMPLIANCE
# =============================================================================


def assess_regulation(text: str, regulation: str) -> ComplianceResult:
    """Assess a single regulation against the text."""
    found = matched_terms(_REGULATION_PATTERNS.get(regulation, ()), text)
    mentioned = regulation.lower() in text.lower()

    if found:
        relevance = "high"
    elif mentioned:
        relevance = "medium"
    else:
        relevance = "low"

    return ComplianceResult(
        regulation=regulation,
        relevance=relevance,
        found_keywords=found,
        requirements=list(REGULATION_REQUIREMENTS.get(regulation, [])),
        risk_level="medium" if mentioned else "high",
    )


def assess_compliance(text: str, profile: IndustryProfile) -> List[ComplianceResult]:
    """One ComplianceResult per profile regulation, in profile order."""
    return [assess_regulation(text, regulation) for regulation in profile.regulations]


# =============================================================================
# RISK
# =============================================================================


def calculate_security_risk(text: str, profile: IndustryProfile) -> int:
    risk = SECURITY_RISK_BASE
    if profile.id in HIGH_SECURITY_INDUSTRIES:
        risk += 2
    if contains_any(text, SECURITY_MENTIONS):
        risk -= 1
    return clamp(risk, RISK_MIN, RISK_MAX)


def calculate_compliance_risk(text: str, profile: IndustryProfile) -> int:
    risk = COMPLIANCE_RISK_BASE
    if len(profile.regulations) > 2:
        risk += 2
    if contains_any(text, COMPLIANCE_MENTIONS):
        risk -= 1
    return clamp(risk, RISK_MIN, RISK_MAX)


def calculate_technical_risk(text: str, profile: IndustryProfile) -> int:
    risk = TECHNICAL_RISK_BASE
    if len(text) > LARGE_DOCUMENT_CHARS:
        risk += 1
    if contains_any(text, MODERN_TECH_MENTIONS):
        risk -= 1
    return clamp(risk, RISK_MIN, RISK_MAX)


def risk_mitigations(security: int, compliance: int, technical: int) -> List[str]:
    """Mitigation steps for every sub-score above the alert threshold."""
    mitigations = []
    for area, score in (("security", security), ("compliance", compliance), ("technical", technical)):
        if score > RISK_ALERT_THRESHOLD:
            mitigations.extend(RISK_MITIGATIONS[area])
    return mitigations


def assess_risk(text: str, profile: IndustryProfile) -> RiskAssessment:
    security = calculate_security_risk(text, profile)
    compliance = calculate_compliance_risk(text, profile)
    technical = calculate_technical_risk(text, profile)

    logger.debug(
        f"Risk for {profile.id}: security={security}, "
        f"compliance={compliance}, technical={technical}"
    )

    return RiskAssessment(
        overall=max(security, compliance, technical),
        security=security,
        compliance=compliance,
        technical=technical,
        recommendations=risk_mitigations(security, compliance, technical),
    )
