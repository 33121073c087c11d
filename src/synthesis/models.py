"""
Analysis Report Data Models

The canonical report shape. Every field is produced by the synthesizer and
stored as-is: there are no computed-on-read fields, so to_dict/from_dict
round-trip exactly. Sections are frozen, so fields cannot be reassigned,
but list fields are plain lists. to_dict always returns fresh copies.

JSON keys are camelCase to match what presentation code consumes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..industry.catalog import IndustryProfile


# =============================================================================
# REPORT SECTIONS
# =============================================================================


@dataclass(frozen=True)
class KeywordCategories:
    """Catalog terms found in the text, split by kind."""
    technology: List[str] = field(default_factory=list)
    business: List[str] = field(default_factory=list)
    compliance: List[str] = field(default_factory=list)

    @property
    def all(self) -> List[str]:
        return [*self.technology, *self.business, *self.compliance]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "technology": list(self.technology),
            "business": list(self.business),
            "compliance": list(self.compliance),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeywordCategories":
        return cls(
            technology=list(data.get("technology", [])),
            business=list(data.get("business", [])),
            compliance=list(data.get("compliance", [])),
        )


@dataclass(frozen=True)
class Recommendations:
    """Directives grouped into high / medium / low priority buckets."""
    high: List[str] = field(default_factory=list)
    medium: List[str] = field(default_factory=list)
    low: List[str] = field(default_factory=list)

    @property
    def all(self) -> List[str]:
        return [*self.high, *self.medium, *self.low]

    def to_dict(self) -> Dict[str, Any]:
        return {"high": list(self.high), "medium": list(self.medium), "low": list(self.low)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recommendations":
        return cls(
            high=list(data.get("high", [])),
            medium=list(data.get("medium", [])),
            low=list(data.get("low", [])),
        )


@dataclass(frozen=True)
class BudgetEstimate:
    min: int
    max: int
    confidence: str = "medium"
    factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "confidence": self.confidence,
            "factors": list(self.factors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BudgetEstimate":
        return cls(
            min=int(data.get("min", 0)),
            max=int(data.get("max", 0)),
            confidence=data.get("confidence", "medium"),
            factors=list(data.get("factors", [])),
        )


@dataclass(frozen=True)
class ProjectPhase:
    name: str
    duration: int  # months
    dependencies: List[str] = field(default_factory=list)
    deliverables: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "dependencies": list(self.dependencies),
            "deliverables": list(self.deliverables),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectPhase":
        return cls(
            name=data["name"],
            duration=int(data.get("duration", 0)),
            dependencies=list(data.get("dependencies", [])),
            deliverables=list(data.get("deliverables", [])),
        )


@dataclass(frozen=True)
class TimelineEstimate:
    estimated: int  # months
    phases: List[ProjectPhase] = field(default_factory=list)
    critical_path: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimated": self.estimated,
            "phases": [p.to_dict() for p in self.phases],
            "criticalPath": list(self.critical_path),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimelineEstimate":
        return cls(
            estimated=int(data.get("estimated", 0)),
            phases=[ProjectPhase.from_dict(p) for p in data.get("phases", [])],
            critical_path=list(data.get("criticalPath", [])),
        )


@dataclass(frozen=True)
class TechStack:
    frontend: List[str] = field(default_factory=list)
    backend: List[str] = field(default_factory=list)
    database: List[str] = field(default_factory=list)
    infrastructure: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frontend": list(self.frontend),
            "backend": list(self.backend),
            "database": list(self.database),
            "infrastructure": list(self.infrastructure),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TechStack":
        return cls(
            frontend=list(data.get("frontend", [])),
            backend=list(data.get("backend", [])),
            database=list(data.get("database", [])),
            infrastructure=list(data.get("infrastructure", [])),
        )


@dataclass(frozen=True)
class SuccessMetric:
    name: str
    current: str
    target: str
    improvement: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "current": self.current,
            "target": self.target,
            "improvement": self.improvement,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SuccessMetric":
        return cls(
            name=data["name"],
            current=data.get("current", "TBD"),
            target=data.get("target", ""),
            improvement=data.get("improvement", ""),
        )


@dataclass(frozen=True)
class ComplianceResult:
    """Assessment of one regulation against the text."""
    regulation: str
    relevance: str  # high, medium, low
    found_keywords: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    risk_level: str = "high"  # medium if the regulation is discussed, else high

    def to_dict(self) -> Dict[str, Any]:
        return {
            "regulation": self.regulation,
            "relevance": self.relevance,
            "foundKeywords": list(self.found_keywords),
            "requirements": list(self.requirements),
            "riskLevel": self.risk_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplianceResult":
        return cls(
            regulation=data["regulation"],
            relevance=data.get("relevance", "low"),
            found_keywords=list(data.get("foundKeywords", [])),
            requirements=list(data.get("requirements", [])),
            risk_level=data.get("riskLevel", "high"),
        )


@dataclass(frozen=True)
class RiskAssessment:
    """Risk sub-scores on a 1-10 scale. overall is the max of the three."""
    overall: int
    security: int
    compliance: int
    technical: int
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "security": self.security,
            "compliance": self.compliance,
            "technical": self.technical,
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskAssessment":
        return cls(
            overall=int(data.get("overall", 1)),
            security=int(data.get("security", 1)),
            compliance=int(data.get("compliance", 1)),
            technical=int(data.get("technical", 1)),
            recommendations=list(data.get("recommendations", [])),
        )


# =============================================================================
# REPORT
# =============================================================================


@dataclass(frozen=True)
class AnalysisReport:
    """
    Complete synthesized report for one input text.

    Created fresh per analysis. Fields cannot be reassigned after creation.
    """
    detected_industry: IndustryProfile
    confidence: int
    summary: str
    keyword_categories: KeywordCategories
    recommendations: Recommendations
    estimated_budget: BudgetEstimate
    timeline: TimelineEstimate
    recommended_stack: TechStack
    success_metrics: List[SuccessMetric] = field(default_factory=list)
    compliance_results: List[ComplianceResult] = field(default_factory=list)
    risk_assessment: RiskAssessment = field(
        default_factory=lambda: RiskAssessment(overall=1, security=1, compliance=1, technical=1)
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detectedIndustry": self.detected_industry.to_dict(),
            "confidence": self.confidence,
            "summary": self.summary,
            "keywordCategories": self.keyword_categories.to_dict(),
            "recommendations": self.recommendations.to_dict(),
            "estimatedBudget": self.estimated_budget.to_dict(),
            "timeline": self.timeline.to_dict(),
            "recommendedStack": self.recommended_stack.to_dict(),
            "successMetrics": [m.to_dict() for m in self.success_metrics],
            "complianceResults": [c.to_dict() for c in self.compliance_results],
            "riskAssessment": self.risk_assessment.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisReport":
        return cls(
            detected_industry=IndustryProfile.from_dict(data["detectedIndustry"]),
            confidence=int(data["confidence"]),
            summary=data.get("summary", ""),
            keyword_categories=KeywordCategories.from_dict(data.get("keywordCategories", {})),
            recommendations=Recommendations.from_dict(data.get("recommendations", {})),
            estimated_budget=BudgetEstimate.from_dict(data.get("estimatedBudget", {})),
            timeline=TimelineEstimate.from_dict(data.get("timeline", {})),
            recommended_stack=TechStack.from_dict(data.get("recommendedStack", {})),
            success_metrics=[SuccessMetric.from_dict(m) for m in data.get("successMetrics", [])],
            compliance_results=[
                ComplianceResult.from_dict(c) for c in data.get("complianceResults", [])
            ],
            risk_assessment=RiskAssessment.from_dict(data.get("riskAssessment", {})),
        )
