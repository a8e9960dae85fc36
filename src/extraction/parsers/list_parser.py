"""
List Parsers

Extract benefit and tip statements from article lists and paragraphs,
already partitioned into the buckets the guide generator expects:

- BenefitListParser -> {'physical': [...], 'mental': [...], 'general': [...]}
- TipListParser -> {'beginners': [...], 'practice': [...], 'props': [...]}
"""

from typing import Dict, List

from ...common.text_utils import split_sentences
from ...guide.categorizer import (
    BENEFIT_SENTENCE_PATTERN,
    classify_benefit,
    classify_tip,
)
from .html_parser import HTMLSectionParser


class BenefitListParser(HTMLSectionParser):
    """Benefits from list items plus benefit-like sentences in paragraphs."""

    def parse(self) -> Dict[str, List[str]]:
        benefits: Dict[str, List[str]] = {'physical': [], 'mental': [], 'general': []}

        for li in self.element.find_all('li'):
            text = self._clean_text(li.get_text())
            if text:
                benefits[classify_benefit(text)].append(text)

        for paragraph in self.element.find_all('p'):
            text = self._clean_text(paragraph.get_text())
            for sentence in split_sentences(text):
                if BENEFIT_SENTENCE_PATTERN.search(sentence):
                    statement = sentence.strip().rstrip('.') + '.'
                    benefits[classify_benefit(sentence)].append(statement)

        return benefits


class TipListParser(HTMLSectionParser):
    """Tips from paragraphs and list items; unrelated text is dropped."""

    def parse(self) -> Dict[str, List[str]]:
        tips: Dict[str, List[str]] = {'beginners': [], 'practice': [], 'props': []}

        for elem in self.element.find_all(['p', 'li']):
            text = self._clean_text(elem.get_text())
            if not text:
                continue
            bucket = classify_tip(text)
            if bucket is not None:
                tips[bucket].append(text)

        return tips
