"""
Test Suite: Text Preprocessing

Tests normalization, frequent terms, language detection and quality metrics.
"""

import pytest

from src.analysis import (
    InvalidInput,
    analyze_text_quality,
    build_preprocessing_result,
    count_technical_terms,
    detect_language,
    extract_frequent_terms,
    preprocess_text,
    readability_score,
)


class TestPreprocessText:
    """Test whitespace normalization."""

    def test_line_breaks(self):
        assert preprocess_text("a\r\nb\rc") == "a\nb\nc"

    def test_inline_whitespace(self):
        assert preprocess_text("a  \t  b") == "a b"

    def test_blank_line_runs(self):
        assert preprocess_text("a\n\n\n\n\nb") == "a\n\nb"

    def test_trim(self):
        assert preprocess_text("   padded   ") == "padded"

    def test_empty(self):
        assert preprocess_text("") == ""

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInput):
            preprocess_text(b"bytes")


class TestTextStatistics:
    """Test frequent terms, language and readability."""

    def test_frequent_terms(self):
        text = "Kubernetes kubernetes, Docker cluster. The and with for"
        assert extract_frequent_terms(text) == ["kubernetes", "docker", "cluster"]

    def test_frequent_terms_limit(self):
        text = "alpha beta gamma delta epsilon"
        assert extract_frequent_terms(text, max_terms=2) == ["alpha", "beta"]

    def test_detect_german(self):
        assert detect_language("Das ist der Plan und die Idee") == "DE"

    def test_detect_english(self):
        assert detect_language("This is the plan and the idea for this team") == "EN"

    def test_detect_unknown(self):
        assert detect_language("") == "UNKNOWN"
        assert detect_language("Kubernetes Docker") == "UNKNOWN"

    def test_readability_of_empty_text(self):
        assert readability_score("") == 100.0

    def test_readability_of_long_sentence(self):
        text = " ".join(["word"] * 200) + "."
        assert readability_score(text) == pytest.approx(3.835)

    def test_quality_metrics(self):
        metrics = analyze_text_quality("Hello world. Second sentence here.\n\nNew paragraph.")
        assert metrics["wordCount"] == 7
        assert metrics["sentenceCount"] == 3
        assert metrics["paragraphCount"] == 2
        assert metrics["uniqueWords"] == 7
        assert metrics["lexicalDiversity"] == 1.0
        assert metrics["readabilityScore"] == 100.0
        assert metrics["overallQualityScore"] == 35

    def test_quality_of_empty_text(self):
        metrics = analyze_text_quality("")
        assert metrics["wordCount"] == 0
        assert metrics["averageWordsPerSentence"] == 0
        assert metrics["lexicalDiversity"] == 0

    def test_technical_terms(self):
        assert count_technical_terms("REST API on AWS with Docker") == 4
        assert count_technical_terms("Nothing technical") == 0


class TestPreprocessingResult:
    """Test the combined preprocessing result."""

    def test_lengths_and_ratio(self):
        original = "Hello   world"
        result = build_preprocessing_result(original, preprocess_text(original))
        assert result.original_length == 13
        assert result.processed_length == 11
        assert result.compression_ratio == pytest.approx(11 / 13)

    def test_links_and_code_blocks(self):
        text = "See https://example.com and http://docs.example.org\n```py\nprint()\n```"
        result = build_preprocessing_result(text, text)
        assert result.link_count == 2
        assert result.code_block_count == 1

    def test_empty_text(self):
        result = build_preprocessing_result("", "")
        assert result.compression_ratio == 1.0
        assert result.extracted_keywords == []

    def test_to_dict(self):
        data = build_preprocessing_result("Die API ist fertig", "Die API ist fertig").to_dict()
        assert set(data) == {
            "originalLength", "processedLength", "compressionRatio", "detectedLanguage",
            "extractedKeywords", "qualityMetrics", "codeBlockCount", "linkCount",
            "technicalTermCount",
        }
        assert data["technicalTermCount"] == 1
