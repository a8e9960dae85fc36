"""
Guide Scraper

Scrapes every configured source and writes one JSON file per guide section
(<output_dir>/<section>.json) shaped as a list of {'source', 'data'} entries.

Features:
- Per-source error handling (a failing source never stops the run)
- Sections without any result write no file
- Parser selection by name from config/sources.yaml
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from ..common.config_loader import load_sources
from .page_fetcher import PageFetcher
from .parsers import get_parser

logger = logging.getLogger(__name__)


class GuideScraper:
    """Scrapes guide sources section by section."""

    def __init__(
        self,
        output_dir: str,
        fetcher: PageFetcher,
        sources: Optional[Dict[str, List[Dict[str, str]]]] = None,
    ):
        """
        Initialize the scraper.

        Args:
            output_dir: Directory for <section>.json output
            fetcher: PageFetcher used to retrieve HTML
            sources: Section -> source definitions (if None, loads config/sources.yaml)
        """
        self.output_dir = output_dir
        self.fetcher = fetcher
        self.sources = sources if sources is not None else load_sources()

        self.failed_sources: List[Dict[str, str]] = []

        os.makedirs(output_dir, exist_ok=True)

    def scrape_source(self, source: Dict[str, str]) -> Optional[Any]:
        """
        Fetch and parse one source.

        Returns:
            Parsed data, or None if the selector matched nothing

        Raises:
            requests.RequestException: If fetching fails
            ValueError: If the configured parser is unknown
        """
        parser_class = get_parser(source['processor'])
        html = self.fetcher.fetch(source['name'], source['url'])

        soup = BeautifulSoup(html, "lxml")
        target = soup.select_one(source['selector'])
        if target is None:
            logger.warning("Could not find selector \"%s\" in %s", source['selector'], source['name'])
            return None

        return parser_class(target).parse()

    def scrape_section(self, section: str, sources: List[Dict[str, str]]) -> List[Dict[str, Any]]:
        """Scrape all sources of one section, skipping failures."""
        logger.info("Scraping %s...", section)
        results = []

        for source in sources:
            logger.info("- Scraping from %s", source['name'])
            try:
                data = self.scrape_source(source)
            except (requests.RequestException, ValueError, KeyError, OSError) as e:
                error_msg = f"{type(e).__name__}: {str(e)[:100]}"
                logger.error("Error scraping %s: %s", source.get('name', '?'), error_msg)
                self.failed_sources.append({"source": source.get('name', '?'), "error": error_msg})
                continue

            if data:
                logger.info("Scraped data from %s", source['name'])
                results.append({"source": source['name'], "data": data})
            else:
                logger.warning("No data scraped from %s", source['name'])

        return results

    def save_section(self, section: str, results: List[Dict[str, Any]]) -> str:
        output_path = os.path.join(self.output_dir, f"{section}.json")
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        return output_path

    def scrape_all(self) -> Dict[str, int]:
        """
        Scrape every section.

        Returns:
            Dictionary mapping section name to the number of sources saved
        """
        stats = {}
        for section, sources in self.sources.items():
            results = self.scrape_section(section, sources)
            stats[section] = len(results)

            if results:
                output_path = self.save_section(section, results)
                logger.info("Saved %d %s results to %s", len(results), section, output_path)
            else:
                logger.warning("No %s results were found to save", section)

        return stats
