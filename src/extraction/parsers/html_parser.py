"""
HTML Section Parsers

Extracts yoga style records from article pages where each style is a
heading followed by one or more paragraphs:

    <h2>Hatha Yoga</h2>
    <p>Hatha is a slower-paced practice...</p>
    <p>It is great for beginners.</p>

Two layouts are supported:
- HeadingSectionParser: h2/h3 headings, stop at any h1-h4
- SubheadingSectionParser: h3/h4 headings, stop at any h3-h5
"""

from typing import Dict, List, Sequence

from bs4 import Tag

from ...common.constants import DEFAULT_EXCLUSION_PHRASES
from ...guide.normalizer import normalize_fragment
from ..utils import extract_benefits, extract_suitable_for


class HTMLSectionParser:
    """
    Base parser over a single container element of a scraped page.

    Usage:
        parser = HeadingSectionParser(soup.select_one('.entry-content'))
        styles = parser.parse()
    """

    def __init__(self, element: Tag):
        """
        Initialize the parser.

        Args:
            element: Container element matched by the source selector
        """
        self.element = element

    def parse(self):
        raise NotImplementedError

    def _clean_text(self, text: str) -> str:
        """Clean and normalize text."""
        if not text:
            return ""
        return ' '.join(text.split()).strip()


class HeadingSectionParser(HTMLSectionParser):
    """Yoga styles laid out as h2/h3 headings with paragraphs underneath."""

    heading_tags: Sequence[str] = ('h2', 'h3')
    stop_tags: Sequence[str] = ('h1', 'h2', 'h3', 'h4')
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES

    def parse(self) -> List[Dict]:
        """
        Extract style records.

        Returns:
            List of dicts with name, description, benefits and suitable_for
        """
        styles = []

        for heading in self.element.find_all(list(self.heading_tags)):
            title = normalize_fragment(self._clean_text(heading.get_text()), exclusions=self.exclusions)
            if title is None:
                continue

            description = self._collect_paragraphs(heading)
            if not description:
                continue

            styles.append({
                'name': title,
                'description': description,
                'benefits': extract_benefits(description),
                'suitable_for': extract_suitable_for(description),
            })

        return styles

    def _collect_paragraphs(self, heading: Tag) -> str:
        """Join paragraph text after a heading, up to the next stop heading."""
        parts = []
        for sibling in heading.find_next_siblings():
            if sibling.name in self.stop_tags:
                break
            if sibling.name == 'p':
                text = self._clean_text(sibling.get_text())
                if text:
                    parts.append(text)
        return ' '.join(parts)


class SubheadingSectionParser(HeadingSectionParser):
    """Yoga styles laid out as h3/h4 headings (no exclusion phrases)."""

    heading_tags = ('h3', 'h4')
    stop_tags = ('h3', 'h4', 'h5')
    exclusions = ()
