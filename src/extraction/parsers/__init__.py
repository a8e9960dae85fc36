"""
Specialized parsers for scraped guide pages.

Each parser handles one page layout:
- HeadingSectionParser: styles under h2/h3 headings
- SubheadingSectionParser: styles under h3/h4 headings
- PoseCardParser: pose listing cards
- BenefitListParser: benefit lists and sentences
- TipListParser: practice tips
"""

from .html_parser import HeadingSectionParser, HTMLSectionParser, SubheadingSectionParser
from .list_parser import BenefitListParser, TipListParser
from .pose_parser import PoseCardParser

# Registry of parsers referenced by name from config/sources.yaml
PARSERS = {
    'heading_sections': HeadingSectionParser,
    'subheading_sections': SubheadingSectionParser,
    'pose_cards': PoseCardParser,
    'benefit_lists': BenefitListParser,
    'practice_tips': TipListParser,
}


def get_parser(name: str):
    """
    Get the parser class registered under a name.

    Raises:
        ValueError: If no parser is registered under that name
    """
    try:
        return PARSERS[name]
    except KeyError:
        supported = ', '.join(PARSERS.keys())
        raise ValueError(f"Unsupported parser: {name}. Supported: {supported}") from None


__all__ = [
    'HTMLSectionParser',
    'HeadingSectionParser',
    'SubheadingSectionParser',
    'PoseCardParser',
    'BenefitListParser',
    'TipListParser',
    'PARSERS',
    'get_parser',
]
