#!/usr/bin/env python3
"""
Guide Content Updater

Reads scraped section files and generates the guide include files, then
points the guide template at them.

Usage:
    python3 scripts/update_guide_content.py
    python3 scripts/update_guide_content.py --scraped _data/scraped \\
        --includes _includes/guide --template guide/index.njk
    python3 scripts/update_guide_content.py --skip-template
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.log_config import setup_logging
from src.guide import GuideContentGenerator, GuideTemplateUpdater

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Generate guide includes from scraped data")
    parser.add_argument(
        "--scraped", "-s",
        default="_data/scraped",
        help="Directory with scraped <section>.json files (default: _data/scraped)"
    )
    parser.add_argument(
        "--includes", "-i",
        default="_includes/guide",
        help="Output directory for generated includes (default: _includes/guide)"
    )
    parser.add_argument(
        "--template", "-t",
        default="guide/index.njk",
        help="Guide page template to update (default: guide/index.njk)"
    )
    parser.add_argument(
        "--skip-template",
        action="store_true",
        help="Only generate includes, leave the guide template untouched"
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

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    generator = GuideContentGenerator(scraped_dir=args.scraped, includes_dir=args.includes)
    report = generator.run()

    template_updated = False
    if not args.skip_template:
        template_updated = GuideTemplateUpdater(args.template, args.includes).update()

    print("\n" + "=" * 60)
    print("Guide Content Summary")
    print("=" * 60)
    for section, status in report.items():
        print(f"  {section:<12} {status}")
    print(f"\n  Template updated: {'yes' if template_updated else 'no'}")
    print("=" * 60)

    if "failed" in report.values():
        sys.exit(1)


if __name__ == "__main__":
    main()
