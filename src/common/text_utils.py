"""
Text Utilities

Helper functions for text processing and cleanup.
"""

import re
from typing import List

_HTML_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """
    Escape the five HTML special characters.

    Ampersands are replaced first so entities produced by the later
    replacements are not escaped again.

    Args:
        text: Raw text

    Returns:
        Text safe for embedding in markup
    """
    if not text:
        return ""
    for char, entity in _HTML_REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return text[:1].upper() + text[1:]


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip."""
    if not text:
        return ""
    return re.sub(r'\s+', ' ', text).strip()


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on a period followed by whitespace.

    The trailing period of each split sentence is consumed by the split,
    so callers re-append it where needed.
    """
    if not text:
        return []
    return [s for s in re.split(r'\.\s+', text) if s.strip()]


def sanitize_filename(name: str) -> str:
    """
    Turn an arbitrary source name into a safe lowercase filename stem.

    Example:
        >>> sanitize_filename("Yoga Journal - Poses")
        'yoga_journal___poses'
    """
    return re.sub(r'[^a-z0-9]', '_', name, flags=re.IGNORECASE).lower()
