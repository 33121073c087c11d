"""
Summary Generation

Takes the first few non-empty lines of the text, truncates them and wraps
them in a template naming the industry and its focus areas.
"""

from ..industry.catalog import IndustryProfile
from .rules import SUMMARY_MAX_CHARS, SUMMARY_MAX_LINES, SUMMARY_TEMPLATE


def extract_excerpt(text: str) -> str:
    lines = [line for line in text.split("\n") if line.strip()]
    return " ".join(lines[:SUMMARY_MAX_LINES])[:SUMMARY_MAX_CHARS]


def generate_summary(text: str, profile: IndustryProfile) -> str:
    return SUMMARY_TEMPLATE.format(
        industry=profile.name,
        excerpt=extract_excerpt(text),
        focus_areas=", ".join(profile.focus_areas),
    )
