"""
Scraping modules for guide content sources.

Modules:
    page_fetcher - PageFetcher with on-disk HTML cache
    guide_scraper - GuideScraper writing <section>.json files
    utils - Sentence helpers (extract_benefits, extract_suitable_for)
    parsers - Layout-specific HTML parsers
"""

from .guide_scraper import GuideScraper
from .page_fetcher import PageFetcher
from .parsers import (
    PARSERS,
    BenefitListParser,
    HeadingSectionParser,
    PoseCardParser,
    SubheadingSectionParser,
    TipListParser,
    get_parser,
)
from .utils import extract_benefits, extract_suitable_for

__all__ = [
    'GuideScraper',
    'PageFetcher',
    'PARSERS',
    'get_parser',
    'HeadingSectionParser',
    'SubheadingSectionParser',
    'PoseCardParser',
    'BenefitListParser',
    'TipListParser',
    'extract_benefits',
    'extract_suitable_for',
]
