#!/usr/bin/env python3
"""
Theme Attribution Check

Verifies every optimized theme image has a credit heading in
image-sources.md and is defined in the theme catalog.

Usage:
    python3 scripts/verify_themes.py
    python3 scripts/verify_themes.py --assets-dir assets/themes

Exit codes:
    0 = all themes attributed and catalogued
    1 = missing attribution or catalog entries
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_theme_settings
from src.common.log_config import setup_logging
from src.themes import ThemeContext, verify_attributions

logger = logging.getLogger(__name__)


def main():
    settings = load_theme_settings()

    parser = argparse.ArgumentParser(description="Verify theme image attributions")
    parser.add_argument(
        "--assets-dir",
        default=settings.get("assets_dir", "assets/themes"),
        help="Theme assets directory containing optimized/ (default from config/themes.yaml)"
    )
    parser.add_argument(
        "--sources-md",
        default=settings.get("image_sources", "assets/themes/image-sources.md"),
        help="Markdown file with image credits (default from config/themes.yaml)"
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

    try:
        report = verify_attributions(
            args.sources_md,
            os.path.join(args.assets_dir, "optimized"),
            settings.get("image_extensions") or (".jpg", ".jpeg", ".png", ".webp"),
        )
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)

    context = ThemeContext.from_settings(settings)
    print(f"Default theme: {context.default_theme.label} (stored under '{context.storage_key}')")
    print(f"Checked {len(report.checked)} themes")
    if report.missing_attribution:
        print("Missing attribution in image-sources.md:")
        for theme_id in report.missing_attribution:
            print(f"  - {theme_id}")
    if report.missing_from_catalog:
        print("Missing from theme catalog:")
        for theme_id in report.missing_from_catalog:
            print(f"  - {theme_id}")
    if report.ok:
        print("All themes have proper attribution")

    sys.exit(0 if report.ok else 1)


if __name__ == "__main__":
    main()
