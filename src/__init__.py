"""
Document Industry Analyzer

A rule-based engine that:
1. Classifies document text into an industry vertical
2. Synthesizes a structured report (keywords, recommendations, budget,
   timeline, stack, compliance, risk, success metrics)
3. Optionally compares with a remote analysis backend
"""

__version__ = "0.1.0"
