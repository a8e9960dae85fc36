"""
Guide Content Generator

Reads scraped section files (<scraped_dir>/<section>.json), renders each
section and writes the include files (<includes_dir>/<section>.html).

A missing or empty section file skips that section. A failure while
rendering one section is logged and the remaining sections still run.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from ..common.config_loader import load_guide_settings
from .renderer import ContentRenderer, UnknownCategoryError

logger = logging.getLogger(__name__)

STATUS_GENERATED = "generated"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"


class GuideContentGenerator:
    """Generates guide include files from scraped data."""

    def __init__(
        self,
        scraped_dir: str,
        includes_dir: str,
        settings: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the generator.

        Args:
            scraped_dir: Directory holding <section>.json scrape output
            includes_dir: Directory the <section>.html includes are written to
            settings: Guide settings dict (if None, loads config/guide.yaml)
        """
        if settings is None:
            settings = load_guide_settings()

        self.scraped_dir = scraped_dir
        self.includes_dir = includes_dir
        self.sections: List[str] = list(settings.get('sections', []))
        self.renderer = ContentRenderer(settings)

        os.makedirs(includes_dir, exist_ok=True)

    def load_section_data(self, section: str) -> List[dict]:
        """
        Load scraped entries for one section.

        Returns:
            List of {'source', 'data'} entries; empty when the file is
            missing or unreadable
        """
        path = os.path.join(self.scraped_dir, f"{section}.json")
        if not os.path.exists(path):
            logger.info("No data file found for %s", section)
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading %s data: %s", section, e)
            return []

        if not isinstance(data, list):
            logger.error("Error loading %s data: expected a list of sources", section)
            return []

        entries = [
            entry for entry in data
            if isinstance(entry, dict) and isinstance(entry.get('source', ''), str)
        ]
        if len(entries) < len(data):
            logger.warning("Ignored %d malformed %s entries", len(data) - len(entries), section)

        logger.info("Loaded %s data from %s", section, path)
        return entries

    def include_path(self, section: str) -> str:
        return os.path.join(self.includes_dir, f"{section}.html")

    def generate_section(self, section: str) -> str:
        """
        Generate and write the include file for one section.

        Returns:
            One of 'generated', 'skipped', 'failed'
        """
        sources = self.load_section_data(section)
        if not sources:
            logger.info("Skipping %s (no data)", section)
            return STATUS_SKIPPED

        try:
            content = self.renderer.render_section(section, sources)
        except UnknownCategoryError as e:
            logger.error("Error generating content for %s: %s", section, e)
            return STATUS_FAILED

        output_path = self.include_path(section)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        logger.info("Generated content for %s -> %s", section, output_path)
        return STATUS_GENERATED

    def run(self) -> Dict[str, str]:
        """
        Generate every configured section.

        Returns:
            Dictionary mapping section name to its status
        """
        logger.info("Updating guide content with scraped data...")
        report = {section: self.generate_section(section) for section in self.sections}
        logger.info("Guide content update completed")
        return report
