#!/usr/bin/env python3
"""
Guide Source Scraper

Scrapes yoga information (styles, poses, benefits, tips) from the sources
in config/sources.yaml and saves one JSON file per section for
update_guide_content.py.

Environment:
    USE_CACHE=true   Serve previously fetched HTML from the cache directory

Usage:
    python3 scripts/scrape_guide_info.py
    python3 scripts/scrape_guide_info.py --output _data/scraped --cache-dir _cache
    USE_CACHE=true python3 scripts/scrape_guide_info.py --verbose
    python3 scripts/scrape_guide_info.py --log-file _cache/scrape.log
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_request_timeout
from src.common.log_config import setup_logging
from src.extraction import GuideScraper, PageFetcher

load_dotenv()

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Scrape guide content from configured sources")
    parser.add_argument(
        "--output", "-o",
        default="_data/scraped",
        help="Directory for <section>.json output (default: _data/scraped)"
    )
    parser.add_argument(
        "--cache-dir",
        default="_cache",
        help="Directory for cached page HTML (default: _cache)"
    )
    parser.add_argument(
        "--use-cache",
        action="store_true",
        default=os.environ.get("USE_CACHE", "").lower() == "true",
        help="Use cached HTML when available (default: USE_CACHE env var)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )
    parser.add_argument(
        "--log-file",
        help="Also write a debug-level log of the run to this file"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    with PageFetcher(
        cache_dir=args.cache_dir,
        use_cache=args.use_cache,
        timeout=load_request_timeout(),
    ) as fetcher:
        scraper = GuideScraper(output_dir=args.output, fetcher=fetcher)
        stats = scraper.scrape_all()

    print("\n" + "=" * 60)
    print("Scrape Summary")
    print("=" * 60)
    for section, count in stats.items():
        print(f"  {section:<12} {count} source(s) saved")
    if scraper.failed_sources:
        print("\n  Failed sources:")
        for failure in scraper.failed_sources:
            print(f"    - {failure['source']}: {failure['error']}")
    print("=" * 60)

    if not any(stats.values()):
        logger.error("No data was scraped")
        sys.exit(1)


if __name__ == "__main__":
    main()
