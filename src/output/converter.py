"""
Backend Response Converter

Normalizes analysis responses from the remote backend into the canonical
AnalysisReport shape. Remote responses come in several shapes:

- Canonical: the camelCase dict produced by AnalysisReport.to_dict()
- Wrapped: {"analysis": {...}} or {"data": {...}} around any other shape
- Flat legacy: {"keywords": "a, b", "summary": "...",
                "suggestedComponents": "...", "industry": "E-Commerce",
                "confidence": 87.5}

This is the only place that probes field names. Business logic only ever
sees AnalysisReport.

Missing sections are filled from the local synthesizer for the resolved
industry, so the result is always complete.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from ..analysis.errors import InvalidInput
from ..industry.catalog import IndustryCatalog, IndustryProfile, get_catalog
from ..industry.classifier import IndustryClassifier
from ..industry.matching import clamp, round_half_up
from ..synthesis import (
    AnalysisReport,
    BudgetEstimate,
    ComplianceResult,
    KeywordCategories,
    Recommendations,
    ReportSynthesizer,
    RiskAssessment,
    TechStack,
    TimelineEstimate,
)
from ..synthesis.rules import (
    MAX_BUSINESS_KEYWORDS,
    MAX_COMPLIANCE_KEYWORDS,
    MAX_TECHNOLOGY_KEYWORDS,
)

logger = logging.getLogger(__name__)

WRAPPER_KEYS = ("analysis", "data", "result")

# Industry labels used by the remote backend
INDUSTRY_ALIASES: Dict[str, str] = {
    "e-commerce": "ecommerce",
    "ecommerce": "ecommerce",
    "retail": "ecommerce",
    "gesundheitswesen": "healthcare",
    "healthcare": "healthcare",
    "pharma": "healthcare",
    "finanzwesen": "fintech",
    "finance": "fintech",
    "fintech": "fintech",
    "manufacturing": "manufacturing",
    "automotive": "automotive",
    "it/software": "it",
    "it": "it",
    "software": "it",
}


@dataclass
class ConversionResult:
    """Normalized report plus a trail of which fields came from the payload."""
    report: AnalysisReport
    shape: str
    fields_from_payload: List[str] = field(default_factory=list)
    fields_defaulted: List[str] = field(default_factory=list)


class BackendResponseConverter:
    """
    Maps any known backend response shape onto AnalysisReport.

    Usage:
        converter = BackendResponseConverter()
        result = converter.convert(payload, text=original_text)
        report = result.report
    """

    def __init__(self, catalog: Optional[IndustryCatalog] = None):
        self.catalog = catalog or get_catalog()
        self.classifier = IndustryClassifier(self.catalog)
        self.synthesizer = ReportSynthesizer(self.catalog)

    def convert(self, payload: Any, text: str = "") -> ConversionResult:
        """
        Normalize a backend payload.

        Args:
            payload: Decoded JSON body from the backend
            text: The analyzed text, used to fill sections the payload lacks

        Returns:
            ConversionResult

        Raises:
            InvalidInput: payload is not a dict
        """
        if not isinstance(payload, dict):
            raise InvalidInput(
                f"Backend payload must be an object, got {type(payload).__name__}",
                field="payload",
                value=payload,
            )

        data, shape = self._unwrap(payload)

        profile, confidence = self._resolve_industry(data, text)
        baseline = self.synthesizer.synthesize_for(text, profile, confidence)

        overrides: Dict[str, Any] = {}

        summary = data.get("summary")
        if isinstance(summary, str) and summary.strip():
            overrides["summary"] = summary.strip()

        try:
            keywords = self._keyword_categories(data, profile)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring malformed backend keywords: {e}")
            keywords = None
        if keywords is not None:
            overrides["keyword_categories"] = keywords

        recommendations = self._recommendations(data)
        if recommendations is not None:
            overrides["recommendations"] = recommendations

        section_parsers = {
            "estimated_budget": ("estimatedBudget", BudgetEstimate.from_dict),
            "timeline": ("timeline", TimelineEstimate.from_dict),
            "recommended_stack": ("recommendedStack", TechStack.from_dict),
            "risk_assessment": ("riskAssessment", RiskAssessment.from_dict),
        }
        for attr, (key, parse) in section_parsers.items():
            section = data.get(key)
            if isinstance(section, dict) and section:
                try:
                    overrides[attr] = parse(section)
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning(f"Ignoring malformed backend section {key}: {e}")

        compliance = data.get("complianceResults")
        if isinstance(compliance, list) and compliance:
            try:
                overrides["compliance_results"] = [ComplianceResult.from_dict(c) for c in compliance]
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Ignoring malformed backend complianceResults: {e}")

        report = replace(baseline, **overrides)
        from_payload = sorted(overrides)
        defaulted = sorted(
            name for name in (
                "summary", "keyword_categories", "recommendations", "estimated_budget",
                "timeline", "recommended_stack", "risk_assessment", "compliance_results",
            )
            if name not in overrides
        )

        logger.debug(f"Converted backend response ({shape}); defaulted: {defaulted}")
        return ConversionResult(
            report=report,
            shape=shape,
            fields_from_payload=from_payload,
            fields_defaulted=defaulted,
        )

    # -------------------------------------------------------------------------
    # Shape detection
    # -------------------------------------------------------------------------

    def _unwrap(self, payload: Dict[str, Any]):
        for key in WRAPPER_KEYS:
            inner = payload.get(key)
            if isinstance(inner, dict):
                data, shape = self._unwrap(inner)
                return data, f"wrapped:{shape}"
        if isinstance(payload.get("detectedIndustry"), dict):
            return payload, "canonical"
        return payload, "flat"

    # -------------------------------------------------------------------------
    # Field extraction
    # -------------------------------------------------------------------------

    def _resolve_industry(self, data: Dict[str, Any], text: str):
        confidence = _parse_confidence(data.get("confidence"))
        raw = data.get("detectedIndustry") or data.get("industry") or data.get("primaryIndustry")

        profile = None
        if isinstance(raw, dict):
            if isinstance(raw.get("confidence"), (int, float)) and confidence is None:
                confidence = _parse_confidence(raw["confidence"])
            profile = self.resolve_profile(raw.get("id") or raw.get("name") or raw.get("industry"))
        elif isinstance(raw, str):
            profile = self.resolve_profile(raw)

        if profile is None:
            classification = self.classifier.classify(text)
            logger.info(f"Backend industry {raw!r} not recognized, classified locally")
            return classification.industry, classification.confidence

        return profile, confidence if confidence is not None else 10

    def resolve_profile(self, label: Any) -> Optional[IndustryProfile]:
        """Match a backend industry label against catalog ids, names and aliases."""
        if not isinstance(label, str) or not label.strip():
            return None
        profile = self.catalog.profile_by_id(label)
        if profile:
            return profile
        key = label.strip().lower()
        for candidate in self.catalog.all_profiles():
            if candidate.name.lower() == key:
                return candidate
        alias = INDUSTRY_ALIASES.get(key)
        return self.catalog.profile_by_id(alias) if alias else None

    def _keyword_categories(
        self, data: Dict[str, Any], profile: IndustryProfile
    ) -> Optional[KeywordCategories]:
        categories = data.get("keywordCategories")
        if isinstance(categories, dict):
            lists = {}
            for key in ("technology", "business", "compliance"):
                value = categories.get(key) or []
                if not isinstance(value, list):
                    raise TypeError(f"keywordCategories.{key} must be a list, got {type(value).__name__}")
                lists[key] = [item.strip() for item in value if isinstance(item, str) and item.strip()]
            return _normalized_categories(lists["technology"], lists["business"], lists["compliance"])

        keywords = _as_list(data.get("keywords"))
        if not keywords:
            return None

        # Flat keyword lists are sorted into categories by catalog membership
        technologies = {t.lower() for t in profile.technologies}
        regulations = {r.lower() for r in profile.regulations}
        technology, business, compliance = [], [], []
        for keyword in keywords:
            key = keyword.lower()
            if key in technologies:
                technology.append(keyword)
            elif key in regulations:
                compliance.append(keyword)
            else:
                business.append(keyword)

        return _normalized_categories(technology, business, compliance)

    def _recommendations(self, data: Dict[str, Any]) -> Optional[Recommendations]:
        raw = data.get("recommendations")
        if isinstance(raw, dict):
            return Recommendations(
                high=_as_list(raw.get("high")),
                medium=_as_list(raw.get("medium")),
                low=_as_list(raw.get("low")),
            )

        # Unprioritized suggestions land in the medium bucket
        items = _as_list(raw) or _as_list(data.get("suggestedComponents"))
        if items:
            return Recommendations(medium=items)
        return None


# =============================================================================
# HELPERS
# =============================================================================


def _as_list(value: Any) -> List[str]:
    """Coerce comma-separated strings, string lists and {title: ...} items into strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, list):
        items = []
        for item in value:
            if isinstance(item, str) and item.strip():
                items.append(item.strip())
            elif isinstance(item, dict):
                title = item.get("title") or item.get("name") or item.get("action")
                if title:
                    items.append(str(title))
        return items
    return []


def _unique_capped(items: List[str], cap: int) -> List[str]:
    """Drop case-insensitive duplicates, keep first spelling and order, cap length."""
    result = []
    seen = set()
    for item in items:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
        if len(result) >= cap:
            break
    return result


def _normalized_categories(
    technology: List[str], business: List[str], compliance: List[str]
) -> KeywordCategories:
    return KeywordCategories(
        technology=_unique_capped(technology, MAX_TECHNOLOGY_KEYWORDS),
        business=_unique_capped(business, MAX_BUSINESS_KEYWORDS),
        compliance=_unique_capped(compliance, MAX_COMPLIANCE_KEYWORDS),
    )


def _parse_confidence(value: Any) -> Optional[int]:
    """Backend confidence may be 0-1 or 0-100. Normalize to an int in [10, 95]."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    if not math.isfinite(value):
        return None
    if 0 <= value <= 1:
        value = value * 100
    return clamp(round_half_up(value), 10, 95)


def normalize_backend_response(payload: Any, text: str = "") -> AnalysisReport:
    """Normalize any known backend response shape into an AnalysisReport."""
    return BackendResponseConverter().convert(payload, text).report
