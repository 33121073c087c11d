"""
Industry Classifier

Scores free text against every catalog profile and picks the best match.

Scoring:
    score = Σ keyword matches + 0.5 × Σ technology matches

A technology mention is a weaker industry signal than a domain keyword
(a CRM tool shows up in every vertical, "patient intake" does not), so
technology hits count at half weight.

Confidence:
    clamp(round(max_score / word_count × 1000), 10, 95)

Confidence is a heuristic, not a calibrated probability. UI thresholds are
tuned against this exact formula.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .catalog import IndustryCatalog, IndustryProfile, get_catalog
from .matching import clamp, count_matches, round_half_up, word_count
from ..analysis.errors import InvalidInput, require_text

logger = logging.getLogger(__name__)

AUTO_INDUSTRY = "auto"

KEYWORD_WEIGHT = 1.0
TECHNOLOGY_WEIGHT = 0.5

MIN_CONFIDENCE = 10
MAX_CONFIDENCE = 95
CONFIDENCE_SCALE = 1000


@dataclass(frozen=True)
class ClassificationResult:
    """Best-matching industry with an integer confidence in [10, 95]."""
    industry: IndustryProfile
    confidence: int
    pinned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "industry": self.industry.to_dict(),
            "confidence": self.confidence,
        }


class IndustryClassifier:
    """
    Keyword-weighted industry classifier.

    Usage:
        classifier = IndustryClassifier()
        result = classifier.classify("Online shop with checkout and Stripe")
        print(result.industry.id, result.confidence)

        # Explicit selection skips scoring
        result = classifier.classify(text, selected_industry="fintech")
    """

    def __init__(self, catalog: Optional[IndustryCatalog] = None):
        self.catalog = catalog or get_catalog()

    def score(self, profile: IndustryProfile, text: str) -> float:
        """Weighted match score of text against one profile. Always >= 0."""
        compiled = self.catalog.compiled(profile)
        keyword_hits = sum(count_matches(p, text) for _, p in compiled.keywords)
        technology_hits = sum(count_matches(p, text) for _, p in compiled.technologies)
        return keyword_hits * KEYWORD_WEIGHT + technology_hits * TECHNOLOGY_WEIGHT

    def score_all(self, text: str) -> List[Tuple[IndustryProfile, float]]:
        """Scores for every profile, in catalog declaration order."""
        text = require_text(text)
        return [(profile, self.score(profile, text)) for profile in self.catalog.all_profiles()]

    def classify(self, text: str, selected_industry: Optional[str] = None) -> ClassificationResult:
        """
        Classify text, or pin the caller's explicit selection.

        Args:
            text: Free-form input text (may be empty)
            selected_industry: Catalog id, "auto" or None

        Returns:
            ClassificationResult

        Raises:
            InvalidInput: text is not a string, or the pinned id is unknown
        """
        text = require_text(text)

        if selected_industry and selected_industry != AUTO_INDUSTRY:
            return self.pin(selected_industry)

        scores = self.score_all(text)

        best_profile, best_score = scores[0]
        for profile, score in scores[1:]:
            # Strictly greater: earlier declaration wins ties
            if score > best_score:
                best_profile, best_score = profile, score

        confidence = calculate_confidence(best_score, word_count(text))

        logger.info(
            f"Classified text ({len(text)} chars) as {best_profile.id} "
            f"(score={best_score}, confidence={confidence})"
        )
        logger.debug(
            "Industry scores: " + ", ".join(f"{p.id}={s}" for p, s in scores)
        )

        return ClassificationResult(industry=best_profile, confidence=confidence)

    def pin(self, industry_id: str) -> ClassificationResult:
        """Manual selection is ground truth: maximum confidence, no scoring."""
        profile = self.catalog.profile_by_id(industry_id)
        if profile is None:
            raise InvalidInput(
                f"Unknown industry: {industry_id!r}",
                field="selected_industry",
                value=industry_id,
            )
        logger.info(f"Industry pinned by caller: {industry_id}")
        return ClassificationResult(industry=profile, confidence=MAX_CONFIDENCE, pinned=True)


def calculate_confidence(max_score: float, total_words: int) -> int:
    """Normalize the winning score by text length and clamp to [10, 95]."""
    if total_words <= 0:
        return MIN_CONFIDENCE
    raw = round_half_up((max_score / total_words) * CONFIDENCE_SCALE)
    return clamp(raw, MIN_CONFIDENCE, MAX_CONFIDENCE)


def detect_industry(text: str, selected_industry: Optional[str] = None) -> ClassificationResult:
    """Classify text with the process-wide catalog."""
    return IndustryClassifier().classify(text, selected_industry)
