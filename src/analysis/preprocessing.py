"""
Text Preprocessing

Normalization and lightweight text statistics computed before analysis:
- Whitespace / line-break normalization
- Frequent-term extraction (stop-word filtered)
- Function-word language detection (DE / EN)
- Readability and overall quality scores
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import require_text

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "der", "die", "das", "und", "oder", "aber", "in", "von", "zu", "mit",
    "the", "and", "or", "but", "of", "to", "with", "for", "on", "at",
})

GERMAN_MARKERS = ("der", "die", "das", "und", "ist", "mit", "für")
ENGLISH_MARKERS = ("the", "and", "is", "with", "for", "that", "this")

TECHNICAL_TERMS = (
    "API", "REST", "JSON", "XML", "HTTP", "HTTPS", "SQL", "NoSQL",
    "React", "Angular", "Vue", "Node.js", "Express", "Spring", "Django",
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "CI/CD", "DevOps",
)
QUALITY_TECH_TERMS = ("api", "system", "framework", "database", "software")

_LINE_BREAKS = re.compile(r"\r\n|\r")
_INLINE_SPACE = re.compile(r"[ \t]+")
_BLANK_RUNS = re.compile(r"\n{3,}")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_NON_WORD = re.compile(r"[^\w\s]")
_LINK = re.compile(r"https?://\S+")


@dataclass
class PreprocessingResult:
    """Statistics about a preprocessed text."""
    original_length: int
    processed_length: int
    compression_ratio: float
    detected_language: str
    extracted_keywords: List[str] = field(default_factory=list)
    quality_metrics: Dict[str, Any] = field(default_factory=dict)
    code_block_count: int = 0
    link_count: int = 0
    technical_term_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalLength": self.original_length,
            "processedLength": self.processed_length,
            "compressionRatio": round(self.compression_ratio, 4),
            "detectedLanguage": self.detected_language,
            "extractedKeywords": list(self.extracted_keywords),
            "qualityMetrics": dict(self.quality_metrics),
            "codeBlockCount": self.code_block_count,
            "linkCount": self.link_count,
            "technicalTermCount": self.technical_term_count,
        }


def preprocess_text(text: str) -> str:
    """Normalize line breaks and whitespace, then trim."""
    text = require_text(text)
    if not text:
        return ""
    processed = _LINE_BREAKS.sub("\n", text)
    processed = _INLINE_SPACE.sub(" ", processed)
    processed = _BLANK_RUNS.sub("\n\n", processed)
    return processed.strip()


def extract_frequent_terms(text: str, max_terms: int = 10) -> List[str]:
    """Most frequent words longer than three characters, stop words excluded."""
    words = [
        w for w in _NON_WORD.sub(" ", text.lower()).split()
        if len(w) > 3 and w not in STOP_WORDS
    ]
    # Counter.most_common keeps first-seen order among equal counts
    return [word for word, _ in Counter(words).most_common(max_terms)]


def detect_language(text: str) -> str:
    """Guess DE / EN from function words. Returns UNKNOWN on a tie."""
    lowered = text.lower()
    german = sum(1 for w in GERMAN_MARKERS if f" {w} " in lowered)
    english = sum(1 for w in ENGLISH_MARKERS if f" {w} " in lowered)
    if german > english:
        return "DE"
    if english > german:
        return "EN"
    return "UNKNOWN"


def _words(text: str) -> List[str]:
    return text.split()


def _sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def readability_score(text: str) -> float:
    """Simplified Flesch score clamped to [0, 100]."""
    words = _words(text)
    sentences = _sentences(text)
    if not words or not sentences:
        return 100.0
    score = 206.835 - 1.015 * (len(words) / len(sentences))
    return max(0.0, min(100.0, score))


def analyze_text_quality(text: str) -> Dict[str, Any]:
    words = _words(text)
    sentences = _sentences(text)
    paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]
    unique_words = {_NON_WORD.sub("", w.lower()) for w in words}
    unique_words.discard("")

    metrics = {
        "wordCount": len(words),
        "sentenceCount": len(sentences),
        "paragraphCount": len(paragraphs),
        "averageWordsPerSentence": len(words) / len(sentences) if sentences else 0,
        "uniqueWords": len(unique_words),
        "lexicalDiversity": len(unique_words) / len(words) if words else 0,
        "readabilityScore": readability_score(text),
    }
    metrics["overallQualityScore"] = _overall_quality(text, metrics)
    return metrics


def _overall_quality(text: str, metrics: Dict[str, Any]) -> int:
    score = 0
    if metrics["wordCount"] > 100:
        score += 20
    if metrics["wordCount"] > 500:
        score += 10
    if metrics["paragraphCount"] > 2:
        score += 15
    if "\n" in text:
        score += 10
    if metrics["readabilityScore"] > 60:
        score += 25
    lowered = text.lower()
    if any(term in lowered for term in QUALITY_TECH_TERMS):
        score += 20
    return min(100, score)


def count_technical_terms(text: str) -> int:
    lowered = text.lower()
    total = 0
    for term in TECHNICAL_TERMS:
        pattern = rf"(?<!\w){re.escape(term.lower())}(?!\w)"
        total += len(re.findall(pattern, lowered))
    return total


def build_preprocessing_result(original_text: str, processed_text: str) -> PreprocessingResult:
    original_text = require_text(original_text, "original_text")
    processed_text = require_text(processed_text, "processed_text")

    result = PreprocessingResult(
        original_length=len(original_text),
        processed_length=len(processed_text),
        compression_ratio=(
            len(processed_text) / len(original_text) if original_text else 1.0
        ),
        detected_language=detect_language(processed_text),
        extracted_keywords=extract_frequent_terms(processed_text, 10),
        quality_metrics=analyze_text_quality(processed_text),
        code_block_count=processed_text.count("```") // 2,
        link_count=len(_LINK.findall(processed_text)),
        technical_term_count=count_technical_terms(processed_text),
    )
    logger.debug(
        f"Preprocessed {result.original_length} -> {result.processed_length} chars "
        f"(language={result.detected_language})"
    )
    return result
