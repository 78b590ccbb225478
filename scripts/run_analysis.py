#!/usr/bin/env python3
"""
Brand Analysis Runner

Runs the full SearchShare analysis (metrics + actionable insights) on a
JSON file of brand and ranking data, or on the built-in sample market.

Input file format:
    {
        "brand_name": "lavera",
        "aliases": ["lavera naturkosmetik"],
        "brand_keywords": [{"keyword": "lavera", "search_volume": 12100, "is_own_brand": true}, ...],
        "ranked_keywords": [{"keyword": "naturkosmetik", "search_volume": 22200, "position": 4, "url": "/naturkosmetik"}, ...]
    }

Usage:
    # Sample market:
    python scripts/run_analysis.py

    # Own data:
    python scripts/run_analysis.py data.json --brand lavera --alias "lavera naturkosmetik"

    # Write to file:
    python scripts/run_analysis.py data.json --output analysis.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchshare.insights import run_analysis
from searchshare.models import brand_volumes_from_payload, ranked_keywords_from_payload
from searchshare.quality import InvalidRecordError
from searchshare.sample_data import SAMPLE_BRAND_NAME, sample_brand_volumes, sample_ranked_keywords
from searchshare.utils.config import get_settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging for the runner."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_input(path: Path):
    """Load brand name, aliases and records from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    brands = brand_volumes_from_payload(data.get("brand_keywords", []))
    keywords = ranked_keywords_from_payload(data.get("ranked_keywords", []))
    return data.get("brand_name"), data.get("aliases", []), brands, keywords


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a SearchShare brand analysis")
    parser.add_argument("input", nargs="?", type=Path, help="JSON input file (default: sample market)")
    parser.add_argument("--brand", help="Own brand name (overrides the input file)")
    parser.add_argument("--alias", action="append", default=[], help="Brand alias (repeatable)")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON result to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)

    try:
        if args.input:
            brand_name, aliases, brands, keywords = load_input(args.input)
        else:
            logger.info("No input file given, using the sample market")
            brand_name, aliases = SAMPLE_BRAND_NAME, []
            brands, keywords = sample_brand_volumes(), sample_ranked_keywords()
    except InvalidRecordError as e:
        logger.error(f"Invalid input data: {e}")
        return 1

    result = run_analysis(
        keywords,
        brands,
        brand_name=args.brand or brand_name,
        aliases=[*aliases, *args.alias],
    )
    output = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info(f"Analysis written to {args.output}")
    else:
        print(output)

    summary = result.insights.summary
    logger.info(
        f"SOS {result.sos.share_of_search}% | SOV {result.sov.share_of_voice}% | "
        f"gap {result.gap.gap} | top action: {summary.top_priority_action}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
