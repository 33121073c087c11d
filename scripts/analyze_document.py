#!/usr/bin/env python3
"""
Local Analysis Script

Analyze a document from the command line.

Usage:
    python scripts/analyze_document.py requirements.txt
    python scripts/analyze_document.py --text "Online shop with Stripe checkout"
    python scripts/analyze_document.py proposal.md --industry fintech --preprocess --json
    python scripts/analyze_document.py proposal.md --compare   # needs BACKEND_URL in .env
"""

import asyncio
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.analysis import InvalidInput
from src.integrations import BackendComparisonClient
from src.services import DocumentAnalysisService
from src.utils import get_settings


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
        ]
    )


def print_report(data: dict):
    """Human-readable report."""
    industry = data["detectedIndustry"]
    print(f"\n{'='*60}")
    print(f"DOCUMENT ANALYSIS")
    print(f"{'='*60}")
    print(f"Industry:   {industry['name']} ({data['confidence']}%)")
    print(f"Summary:    {data['summary']}")

    keywords = data["keywordCategories"]
    print(f"\nKeywords")
    for category in ("technology", "business", "compliance"):
        print(f"  {category:<11} {', '.join(keywords[category]) or '-'}")

    print(f"\nRecommendations")
    for priority in ("high", "medium", "low"):
        for item in data["recommendations"][priority]:
            print(f"  [{priority}] {item}")

    budget = data["estimatedBudget"]
    print(f"\nBudget:     EUR {budget['min']:,} - {budget['max']:,}")
    print(f"Timeline:   {data['timeline']['estimated']} months")
    print(f"  Critical path: {' -> '.join(data['timeline']['criticalPath'])}")

    risk = data["riskAssessment"]
    print(
        f"\nRisk:       overall {risk['overall']}/10 "
        f"(security {risk['security']}, compliance {risk['compliance']}, "
        f"technical {risk['technical']})"
    )

    print(f"\nCompliance")
    for result in data["complianceResults"]:
        print(f"  {result['regulation']:<14} relevance={result['relevance']:<7} risk={result['riskLevel']}")

    comparison = data.get("backendComparison")
    if comparison:
        remote = comparison["report"]
        print(f"\nBackend:    {remote['detectedIndustry']['name']} ({remote['confidence']}%)")
        print(f"  shape={comparison['shape']}, {comparison['elapsedMs']} ms")

    print(f"{'='*60}\n")


async def run_analysis(
    text: str,
    industry: str,
    preprocess: bool,
    compare: bool,
) -> dict:
    """Run the analysis, optionally with a backend comparison."""
    settings = get_settings()
    service = DocumentAnalysisService()

    if compare and settings.backend_configured:
        async with BackendComparisonClient(
            settings.BACKEND_URL, timeout=settings.BACKEND_TIMEOUT
        ) as client:
            analysis = await service.analyze(text, industry, preprocess=preprocess, backend=client)
    else:
        if compare:
            print("WARNING: --compare needs BACKEND_URL in .env, running locally only", file=sys.stderr)
        analysis = await service.analyze(text, industry, preprocess=preprocess)

    return analysis.to_dict()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Detect the industry of a document and build a project report"
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Text file to analyze (reads stdin when omitted and --text is not given)"
    )
    parser.add_argument(
        "--text", "-t",
        help="Analyze this text instead of a file"
    )
    parser.add_argument(
        "--industry", "-i",
        default=None,
        help="Industry id to pin (default: DEFAULT_INDUSTRY, usually 'auto')"
    )
    parser.add_argument(
        "--preprocess",
        action="store_true",
        help="Normalize whitespace first and include text statistics"
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also query the remote backend (BACKEND_URL)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON report"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )

    args = parser.parse_args()

    load_dotenv()
    setup_logging(args.verbose)

    if args.text is not None:
        text = args.text
    elif args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    industry = args.industry or get_settings().DEFAULT_INDUSTRY

    try:
        data = asyncio.run(run_analysis(text, industry, args.preprocess, args.compare))
    except InvalidInput as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print_report(data)


if __name__ == "__main__":
    main()
