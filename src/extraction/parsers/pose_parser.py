"""
Pose Card Parser

Extracts pose records from listing pages made of cards
(article, .pose-card or .pose-block). Each card yields a name, joined
description text, image URL, difficulty and a pose category.
"""

from typing import Dict, List

from ...guide.categorizer import categorize_pose
from ..utils import extract_benefits
from .html_parser import HTMLSectionParser


class PoseCardParser(HTMLSectionParser):
    """Parses pose cards inside a listing container."""

    CARD_SELECTOR = 'article, .pose-card, .pose-block'

    def parse(self) -> List[Dict]:
        poses = []

        for card in self.element.select(self.CARD_SELECTOR):
            title_elem = card.select_one('h2, h3, .pose-title')
            title = self._clean_text(title_elem.get_text()) if title_elem else ""
            if not title:
                continue

            parts = []
            for paragraph in card.select('p, .pose-description'):
                text = self._clean_text(paragraph.get_text())
                if text:
                    parts.append(text)
            description = ' '.join(parts)

            poses.append({
                'name': title,
                'description': description,
                'image_url': self._extract_image(card),
                'difficulty': self._extract_difficulty(card),
                'benefits': extract_benefits(description),
                'category': categorize_pose(title, description),
            })

        return poses

    @staticmethod
    def _extract_image(card) -> str:
        img = card.find('img')
        if img is None:
            return ""
        return img.get('src') or img.get('data-src') or ""

    def _extract_difficulty(self, card) -> str:
        # Last matching label wins
        difficulty = ""
        for elem in card.select('.difficulty, .level'):
            difficulty = self._clean_text(elem.get_text())
        return difficulty
