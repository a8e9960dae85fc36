"""
Extraction Utilities

Sentence-level helpers shared by the page parsers.
"""

from typing import List

from ..common.text_utils import split_sentences

BENEFIT_WORDS = (
    'improve', 'increase', 'enhance', 'strengthen', 'boost',
    'benefit', 'help', 'reduce', 'relieve', 'lower', 'calm',
)

SUITABLE_PHRASES = (
    'good for', 'great for', 'ideal for', 'perfect for',
    'recommended for', 'suitable for', 'best for',
)


def _sentences_containing(text: str, needles) -> List[str]:
    """Return each sentence (period restored) that contains any needle."""
    matches = []
    for sentence in split_sentences(text):
        lowered = sentence.lower()
        if any(needle in lowered for needle in needles):
            matches.append(sentence.strip().rstrip('.') + '.')
    return matches


def extract_benefits(text: str) -> List[str]:
    """
    Pick out sentences that describe a benefit.

    Example:
        >>> extract_benefits("Hatha is slow. It helps reduce stress. Try it")
        ['It helps reduce stress.']
    """
    return _sentences_containing(text, BENEFIT_WORDS)


def extract_suitable_for(text: str) -> List[str]:
    """Pick out sentences that say who a style suits."""
    return _sentences_containing(text, SUITABLE_PHRASES)


__all__ = ['extract_benefits', 'extract_suitable_for']
